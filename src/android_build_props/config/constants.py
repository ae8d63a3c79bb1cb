"""
Shared constants for manifest and properties handling.
"""

# Namespace of the android: attributes in AndroidManifest.xml
ANDROID_NS = "http://schemas.android.com/apk/res/android"

# Fallbacks when the manifest omits an attribute
DEFAULT_PACKAGE = "unknown"
DEFAULT_VERSION_CODE = "0"
DEFAULT_VERSION_NAME = "0.0"

# Reserved properties key and the separator used for its value
PROGUARD_UUIDS_KEY = "io.sentry.ProguardUuids"
PROGUARD_UUIDS_SEPARATOR = "|"
