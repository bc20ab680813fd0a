"""``trickster routes`` -- route listing placeholder.

Listing routes means importing the application, which this tool does not
do.  The command only confirms it is running in a project root and points
the user at the entry point.  The entry-point file is never opened.
"""

from __future__ import annotations

from trickster_cli.config import Config
from trickster_cli.server import require_entry_point
from trickster_cli.utils import console, print_warning


def report_routes(args: list[str], config: Config | None = None) -> int:
    """Print the route-introspection notice.

    Raises:
        MissingEntryPointError: If the entry point is not in the cwd.
    """
    config = config or Config.from_env()
    require_entry_point(config)

    console.print(f"Loading routes from {config.entry_point}...", highlight=False)
    console.print()
    print_warning("Note: Route inspection requires loading the application.")
    console.print("This feature is not yet implemented.")
    console.print()
    console.print(f"For now, check your {config.entry_point} file for route definitions.")
    return 0
