"""rvc — command dispatch and argument interpretation for a
revision-control command-line client.

Built as a strict layered package: ``core`` (pure tables and parsers),
``infra`` (process and filesystem collaborators) and ``cli`` (argv
entry point and rendering).
"""

from rvc.version import __version__

__all__: list[str] = ["__version__"]
