"""tfgen -- TelemetryFlow RESTful API project generator.

Generates DDD + CQRS Go services (project tree, entities, documentation) and
TelemetryFlow SDK integration code from bundled or user-supplied Jinja2
templates.
"""

from tfgen.version import VERSION as __version__

__all__ = ["__version__"]
