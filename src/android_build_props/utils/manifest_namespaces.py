import re
import xml.etree.ElementTree

def registerManifestNamespaces(manifestPath):
    # Collect every xmlns prefix declared in the file
    namespaces = dict([node for _,node in xml.etree.ElementTree.iterparse(manifestPath, events=["start-ns"])])

    # Register them so the tree is written back with the same prefixes (android:, tools:, ...)
    for prefix in namespaces:
        # The default namespace and ns0-style prefixes can't be registered
        if prefix and not re.match(r"ns\d+$", prefix):
            xml.etree.ElementTree.register_namespace(prefix, namespaces[prefix])
    return namespaces
