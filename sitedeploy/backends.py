from sitedeploy.config import NetstorageConfig, OutputConfig, S3Config
from sitedeploy.netstorage import NetstorageOutput
from sitedeploy.output import Output
from sitedeploy.s3 import S3Output


def create_output(config: OutputConfig) -> Output:
    """Build the output selected by load_config()."""
    if isinstance(config, S3Config):
        return S3Output.from_config(config)
    if isinstance(config, NetstorageConfig):
        return NetstorageOutput(
            host=config.host,
            folder=config.folder,
            key_name=config.key_name,
            secret=config.secret,
            base_url=config.base_url,
        )
    raise TypeError(f"Unsupported output config: {type(config).__name__}")
