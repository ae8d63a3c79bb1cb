from android_build_props.config.constants import DEFAULT_PACKAGE

####################
# Turn a package id into a display name, e.g. com.example.myapp -> Myapp
####################
def appNameFromPackage(package):
    if package is None:
        package = DEFAULT_PACKAGE
    segment = package.rsplit(".", 1)[-1]

    # First character upper, the rest lower: myApp -> Myapp
    return segment[:1].upper() + segment[1:].lower()
