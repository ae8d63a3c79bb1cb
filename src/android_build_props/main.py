"""
Main entry point for the android-build-props tool.
"""
import uuid

#   core imports

from android_build_props.core.android_manifest import AndroidManifest
from android_build_props.core.errors import BuildPropsError
from android_build_props.core.proguard_properties import mergeIdentifiersIntoPropertiesFile

#   utility imports

from android_build_props.utils.cli_tools import abort, getArgs, verbosePrint, warningPrint

def checkIdentifiers(identifiers):
    for ident in identifiers:
        try:
            uuid.UUID(ident)
        except ValueError:
            warningPrint(f"[!] '{ident}' is not a UUID, recording it as-is.")

def main(argv=None):
    # Grab argz
    args = getArgs(argv)

    # Load the manifest
    try:
        manifest = AndroidManifest.from_path(args.manifest)
    except BuildPropsError as e:
        abort(f"Error: {e}")
    verbosePrint(repr(manifest))

    # Bump versions if requested
    if args.set_version_code is not None or args.set_version_name is not None:
        if args.set_version_code is not None:
            manifest.set_version_code(args.set_version_code)
        if args.set_version_name is not None:
            manifest.set_version_name(args.set_version_name)
        try:
            manifest.save()
        except OSError as e:
            abort(f"Error: Failed to write {args.manifest}: {e}")
        print("[+] Updated " + args.manifest)

    print(f"Package:      {manifest.package()}")
    print(f"Name:         {manifest.name()}")
    print(f"Version code: {manifest.version_code()}")
    print(f"Version name: {manifest.version_name()}")

    # Record the ProGuard UUIDs
    if args.write_properties is not None:
        if len(args.uuids) == 0:
            warningPrint("[!] No UUIDs given, the ProGuard UUID list will be empty.")
        checkIdentifiers(args.uuids)
        try:
            mergeIdentifiersIntoPropertiesFile(args.write_properties, args.uuids)
        except (BuildPropsError, OSError) as e:
            abort(f"Error: {e}")
        print("[+] Wrote ProGuard UUIDs to " + args.write_properties)
    elif len(args.uuids) > 0:
        warningPrint("[!] UUIDs given without --write-properties, nothing recorded.")

    # Done
    return 0


if __name__ == '__main__':
    main()
