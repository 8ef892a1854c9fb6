class SaKubeconfigError(RuntimeError):
    pass


class MissingRequiredInput(SaKubeconfigError):
    pass


class SourceLoadError(SaKubeconfigError):
    pass


class NoCurrentContext(SaKubeconfigError):
    pass


class NoClusterForContext(SaKubeconfigError):
    pass


class ServiceAccountNotFound(SaKubeconfigError):
    pass


class NoAssociatedSecret(SaKubeconfigError):
    pass


class SecretReadError(SaKubeconfigError):
    pass


class TokenFieldMissing(SaKubeconfigError):
    pass


class OutputDirError(SaKubeconfigError):
    pass


class WriteError(SaKubeconfigError):
    pass


class OutputPermissionError(SaKubeconfigError):
    # raised after the kubeconfig was written; the file stays on disk
    pass
