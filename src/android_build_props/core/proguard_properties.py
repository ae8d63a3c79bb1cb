'''
Recording ProGuard mapping UUIDs in a Java .properties file.
'''

import os
import re

import javaproperties

from android_build_props.config.constants import PROGUARD_UUIDS_KEY, PROGUARD_UUIDS_SEPARATOR
from android_build_props.core.errors import PersistError
from android_build_props.utils.cli_tools import dbgPrint, verbosePrint

_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b\x0e-\x1f]")


def _decodeProperties(data):
    # Properties files are ISO-8859-1 by convention, UTF-8 is accepted too
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError:
        text = data.decode("iso-8859-1")

    # Control characters (NUL, ...) only show up in binary content
    if _CONTROL_CHARS.search(text):
        return None
    return text


def parseOrEmpty(path):
    """
    Read a properties file into a dict.

    A missing file and a file that can't be parsed both give an empty dict.
    Any other failure to open the file (permissions, a directory in the way)
    raises OSError.
    """
    try:
        with open(path, "rb") as fh:
            data = fh.read()
    except FileNotFoundError:
        dbgPrint(f"[~] No properties file at {path}, starting empty")
        return {}

    text = _decodeProperties(data)
    if text is None:
        # Unparseable content is dropped and replaced on the next write
        dbgPrint(f"[~] Discarding binary properties file {path}")
        return {}

    try:
        return javaproperties.loads(text, object_pairs_hook=dict)
    except javaproperties.InvalidUEscapeError as e:
        dbgPrint(f"[~] Discarding malformed properties file {path}: {e}")
        return {}


def mergeIdentifiersIntoPropertiesFile(path, identifiers):
    identifiers = [str(x) for x in identifiers]
    props = parseOrEmpty(path)
    props[PROGUARD_UUIDS_KEY] = PROGUARD_UUIDS_SEPARATOR.join(identifiers)

    parent = os.path.dirname(os.fspath(path))
    if parent:
        os.makedirs(parent, exist_ok=True)

    verbosePrint(f"[+] Writing {len(identifiers)} ProGuard UUID(s) to {path}")
    with open(path, "w", encoding="iso-8859-1") as fh:
        try:
            javaproperties.dump(props, fh, timestamp=False)
        except (OSError, UnicodeError) as e:
            raise PersistError(f"Could not persist proguard UUID in properties file {path}: {e}") from e
    return props


def readProguardUuids(path):
    value = parseOrEmpty(path).get(PROGUARD_UUIDS_KEY)
    if not value:
        return []
    return value.split(PROGUARD_UUIDS_SEPARATOR)
