import webbrowser
from pathlib import Path


def open_in_viewer(path: Path) -> bool:
    """Ask the platform browser to show a local file."""
    return webbrowser.open(Path(path).resolve().as_uri())
