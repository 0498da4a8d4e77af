"""
Settings bounded context - Domain layer.

Sparse per-user overrides (UserSettings) resolved against a fixed default
table (SettingsResolver) into fully populated ResolvedSettings.
"""
