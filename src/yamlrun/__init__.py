"""Build orchestration for third-party libraries in runtime images."""
