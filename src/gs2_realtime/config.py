"""Client configuration with Pydantic validation.

The configuration describes where the realtime service lives and how the
HTTP transport behaves. Credentials are deliberately not part of it and are
passed separately to the client.
"""

import yaml
from pydantic import BaseModel, ConfigDict, Field

DEFAULT_ENDPOINT = "realtime"
DEFAULT_BASE_URL_TEMPLATE = "https://{endpoint}.{region}.gs2.io"


class RealtimeClientConfig(BaseModel):
    """Connection settings for the realtime API.

    Can be:
    - Created with defaults: `RealtimeClientConfig(region="ap-northeast-1")`
    - Loaded from YAML: `RealtimeClientConfig.from_yaml("client.yaml")`
    - Saved to YAML: `config.to_yaml("client.yaml")`
    """

    model_config = ConfigDict(frozen=True)

    region: str = Field(
        ...,
        min_length=1,
        description="Region the service is deployed in (e.g. ap-northeast-1)",
    )
    endpoint: str = Field(
        DEFAULT_ENDPOINT,
        min_length=1,
        description="Endpoint key of the service, used as the host prefix",
    )
    timeout: float = Field(
        30.0,
        gt=0,
        description="HTTP request timeout in seconds",
    )
    max_retries: int = Field(
        0,
        ge=0,
        description="Connection retries performed by the HTTP transport",
    )
    base_url_template: str = Field(
        DEFAULT_BASE_URL_TEMPLATE,
        description="Base URL format with {endpoint} and {region} placeholders",
    )

    @classmethod
    def from_yaml(cls, path: str) -> "RealtimeClientConfig":
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML configuration file.

        Returns:
            A validated RealtimeClientConfig instance.

        Raises:
            FileNotFoundError: If the file does not exist.
            yaml.YAMLError: If the file is not valid YAML.
            pydantic.ValidationError: If the values are invalid.
        """
        with open(path) as f:
            data = yaml.safe_load(f)
        return cls.model_validate(data or {})

    def to_yaml(self, path: str) -> None:
        """Save configuration to a YAML file.

        Args:
            path: Path where the YAML file will be saved.
        """
        with open(path, "w") as f:
            yaml.dump(
                self.model_dump(),
                f,
                default_flow_style=False,
                sort_keys=False,
            )
