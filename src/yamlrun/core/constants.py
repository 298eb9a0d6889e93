"""Fixed names shared by the build containers and the host-side tooling."""

REGISTRY_FILENAME = "list.yaml"
README_FILENAME = "README.md"

# Docker images are named <prefix>/builder-<image> and <prefix>/runtime-<runtime>
IMAGE_PREFIX = "yamlrun"
WILDCARD_RUNTIME = "all"

# Inside the builder container
CONTAINER_HOME = "/tmp/home"
CONTAINER_BUILD_DIR = "/build"
CONTAINER_BUILDUTILS_DIR = "/buildutils"
CONTAINER_SOURCES_DIR = "/sources"

# Inside the runtime container, for introspection
CONTAINER_UTILS_DIR = "/utils"
INFO_SCRIPT = "info.sh"

DEBUG_ENV_VAR = "YAMLRUN_DEBUG"
