import os
import xml.etree.ElementTree as ET
from typing import Dict, Optional

from android_build_props.config.constants import (
    ANDROID_NS,
    DEFAULT_PACKAGE,
    DEFAULT_VERSION_CODE,
    DEFAULT_VERSION_NAME,
)
from android_build_props.core.errors import ManifestLoadError
from android_build_props.utils.cli_tools import dbgPrint, verbosePrint
from android_build_props.utils.manifest_namespaces import registerManifestNamespaces
from android_build_props.utils.package_name import appNameFromPackage


class AndroidManifest:
    '''
    In-memory AndroidManifest.xml.

    Gives access to the package id and version attributes of the <manifest>
    root element. The tree can be changed in place (directly through `root`
    or with the version setters) and written back with save().

    Examples:
        >>> manifest = AndroidManifest.from_path("app/src/main/AndroidManifest.xml")
        >>> manifest.package(), manifest.version_name()
        ('com.example.myapp', '1.2.0')
    '''

    def __init__(self, path: str, tree: ET.ElementTree, namespaces: Optional[Dict[str, str]] = None):
        self.path = path
        self.tree = tree
        self.root = tree.getroot()
        self.namespaces = namespaces or {}

    # ---------- Creation ----------
    @classmethod
    def from_path(cls, path: str) -> "AndroidManifest":
        """
        Parse the manifest at path. Raises ManifestLoadError if the file can't
        be read or isn't well-formed XML.
        """
        dbgPrint(f"[~] Parsing {path}")
        try:
            tree = ET.parse(path)
            namespaces = registerManifestNamespaces(path)
        except OSError as e:
            raise ManifestLoadError(f"Could not open manifest {path}: {e}") from e
        except ET.ParseError as e:
            raise ManifestLoadError(f"Manifest {path} is not well-formed XML: {e}") from e
        return cls(os.fspath(path), tree, namespaces)

    # ---------- Public APIs ----------
    def get_attribute(self, local_name: str, namespace: Optional[str] = None, default: Optional[str] = None) -> Optional[str]:
        key = local_name if namespace is None else "{" + namespace + "}" + local_name
        return self.root.get(key, default)

    def package(self) -> str:
        """Returns the package ID"""
        return self.get_attribute("package", default=DEFAULT_PACKAGE)

    def name(self) -> str:
        # There is no display name in the manifest, derive one from the package
        return appNameFromPackage(self.package())

    def version_code(self) -> str:
        """Returns the internal version code for this manifest"""
        return self.get_attribute("versionCode", ANDROID_NS, DEFAULT_VERSION_CODE)

    def version_name(self) -> str:
        """Returns the human readable version number of the manifest"""
        return self.get_attribute("versionName", ANDROID_NS, DEFAULT_VERSION_NAME)

    def set_version_code(self, value) -> None:
        self.root.set("{" + ANDROID_NS + "}versionCode", str(value))

    def set_version_name(self, value) -> None:
        self.root.set("{" + ANDROID_NS + "}versionName", str(value))

    def save(self) -> None:
        """
        Write the tree back to the path it was loaded from. The previous
        content is overwritten, I/O failures raise OSError.
        """
        verbosePrint("[+] Writing " + self.path)
        self.tree.write(self.path, encoding="utf-8", xml_declaration=True)

    def __repr__(self) -> str:
        return (f"AndroidManifest(package={self.package()!r}, "
                f"version_code={self.version_code()!r}, "
                f"version_name={self.version_name()!r})")


def loadManifest(path):
    return AndroidManifest.from_path(path)
