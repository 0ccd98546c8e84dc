"""kubefilter -- composable selection filters for Kubernetes event streams."""

__version__ = "0.1.0"
