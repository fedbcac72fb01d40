"""GOG Galaxy companion client probes."""

from galaxy.diagnostics import CompanionSettings

__all__ = ["CompanionSettings"]
