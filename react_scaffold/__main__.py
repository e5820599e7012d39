"""
Main entry point for the react_scaffold package.

When run as `python -m react_scaffold <project-name>`, it scaffolds a new project.
"""

from react_scaffold.cli import main

if __name__ == "__main__":
    main()
