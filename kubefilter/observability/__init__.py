"""Logging and metrics for kubefilter."""
