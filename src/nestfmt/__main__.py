"""Main entry point for nestfmt when run as a module."""

from nestfmt.project_info import get_project_info


def main():
    """Print project description and version."""
    info = get_project_info()
    print(f"nestfmt v{info.version}: {info.description}")


if __name__ == "__main__":
    main()
