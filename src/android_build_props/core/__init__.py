"""Core package for manifest and properties handling."""

from .android_manifest import AndroidManifest, loadManifest
from .errors import BuildPropsError, ManifestLoadError, PersistError
from .proguard_properties import mergeIdentifiersIntoPropertiesFile, parseOrEmpty, readProguardUuids

__all__ = [
    "AndroidManifest",
    "loadManifest",
    "BuildPropsError",
    "ManifestLoadError",
    "PersistError",
    "mergeIdentifiersIntoPropertiesFile",
    "parseOrEmpty",
    "readProguardUuids",
]
