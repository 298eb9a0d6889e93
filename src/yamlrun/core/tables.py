"""Fixed-width library table and its README region."""

import re

from yamlrun.core.registry import Registry

TABLE_COLUMNS = ("ID", "Language", "Name", "Version", "Runtime")
TABLE_WIDTHS = (17, 10, 18, 8, 7)

# From a line starting with "| ID" to the first table line followed by a blank line
README_TABLE_RE = re.compile(r"^\| ID.*?\|\n\n", re.MULTILINE | re.DOTALL)


def _format_row(cells: tuple[str, ...]) -> str:
    padded = [cell.ljust(width) for cell, width in zip(cells, TABLE_WIDTHS, strict=True)]
    return "| " + " | ".join(padded) + " |\n"


def format_library_table(registry: Registry) -> str:
    """Render all libraries, sorted by id, as a markdown table.

    Example:
        | ID                | Language   | Name               | Version  | Runtime |
        | ----------------- | ---------- | ------------------ | -------- | ------- |
        | c-libyaml         | C          | libyaml            | 0.2.5    | static  |
    """
    output = _format_row(TABLE_COLUMNS)
    output += _format_row(tuple("-" * width for width in TABLE_WIDTHS))
    for library_id in registry.sorted_ids():
        lib = registry.libraries[library_id]
        output += _format_row(
            (
                library_id,
                lib.lang or "",
                lib.name or "",
                lib.version or "",
                lib.runtime or "",
            )
        )
    return output


def replace_readme_table(readme: str, table: str) -> str:
    """Replace the library table region in README text.

    Raises:
        ValueError: If the README has no library table
    """
    if README_TABLE_RE.search(readme) is None:
        raise ValueError("README has no library table (a line starting with '| ID')")
    return README_TABLE_RE.sub(lambda _: table + "\n", readme, count=1)
