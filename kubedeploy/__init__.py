"""KubeDeploy - terminal console for deploying and watching container workloads."""

__version__ = "0.1.0"
