"""
Command-line interface argument handling.
"""

import argparse
import sys
from termcolor import colored

def getArgs(argv=None):
    # Only parse args once, unless an explicit argv is given
    if argv is not None or not hasattr(getArgs, "parsed_args"):
        # Parse the command line
        parser = argparse.ArgumentParser(
            description="android-build-props - Read AndroidManifest.xml build metadata and record ProGuard UUIDs in a properties file."
        )
        parser.add_argument("-w", "--write-properties", metavar="PATH", help="Merge the given identifiers into the properties file at PATH (created if missing).")
        parser.add_argument("-u", "--uuid", dest="uuids", metavar="UUID", action="append", default=[], help="ProGuard mapping UUID to record. May be given multiple times, order is kept.")
        parser.add_argument("--set-version-code", type=int, help="Update android:versionCode in the manifest and save it.")
        parser.add_argument("--set-version-name", help="Update android:versionName in the manifest and save it.")
        parser.add_argument("--debug-output", help="Enable debug output.", action="store_true")
        parser.add_argument("-v", "--verbose", help="Enable verbose output.", action="store_true")
        parser.add_argument("manifest", help="Path to the AndroidManifest.xml to read.")

        # Store the parsed args
        getArgs.parsed_args = parser.parse_args(argv)

    # Return the parsed command line args
    return getArgs.parsed_args

def _parsedArgs():
    # Library callers never parse a command line, stay quiet for them
    return getattr(getArgs, "parsed_args", None)

def abort(msg):
    print(colored(msg, "red"))
    sys.exit(1)


def verbosePrint(msg):
    args = _parsedArgs()
    if args is not None and args.verbose:
        for line in msg.split("\n"):
            print(colored("    " + line, "light_grey"))


def dbgPrint(msg):
    args = _parsedArgs()
    if args is not None and args.debug_output:
        print(msg)

####################
# Warning print
####################
def warningPrint(msg):
    print(colored(msg, "yellow"))
