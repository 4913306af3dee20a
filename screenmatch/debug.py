# ABOUTME: Debug tracing helper gated on the DEBUG env var
# ABOUTME: Prints component-tagged messages to stdout when debug mode is on

from screenmatch.config import Config


def debug_log(message: str, component: str = "APP") -> None:
    """Print a debug message tagged with its component, only when DEBUG is enabled"""
    if Config.DEBUG:
        print(f"[DEBUG][{component}] {message}")
