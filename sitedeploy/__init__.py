from .deploy import Deployment, DeployState, deploy_directory, partition
from .output import Output, join_path

__all__ = [
    "DeployState",
    "Deployment",
    "Output",
    "deploy_directory",
    "join_path",
    "partition",
]
