class BuildPropsError(RuntimeError): pass

class ManifestLoadError(BuildPropsError): pass

class PersistError(BuildPropsError): pass
