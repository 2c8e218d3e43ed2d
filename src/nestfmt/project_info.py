"""Project information utilities."""

from pathlib import Path
import tomllib

from pydantic import BaseModel


class ProjectInfo(BaseModel):
    """Project information from pyproject.toml."""

    description: str
    version: str


def get_project_info() -> ProjectInfo:
    """Get project information from pyproject.toml file.

    Returns:
        ProjectInfo: A Pydantic model containing description and version.

    """
    # src/nestfmt/project_info.py -> project root
    project_root = Path(__file__).parent.parent.parent
    pyproject_path = project_root / "pyproject.toml"

    if not pyproject_path.exists():
        return ProjectInfo(
            description="Project description not available",
            version="Version not available",
        )

    try:
        with pyproject_path.open("rb") as f:
            config = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        return ProjectInfo(
            description=f"Error reading project info: {e}",
            version="Version not available",
        )

    project = config.get("project", {})
    return ProjectInfo(
        description=project.get("description", "Project description not available"),
        version=project.get("version", "Version not available"),
    )
