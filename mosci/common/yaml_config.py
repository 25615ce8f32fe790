import yaml

from mosci.common.config import ConfigError, EstimatorConfig


def load_estimator_config(path: str = "config.yaml") -> EstimatorConfig:
    """Load estimator configuration from a YAML file.

    The file is expected to hold an ``estimator`` section, for example::

        estimator:
          alpha: 0.05
          bootstrap_iterations: 2000
          seed: 7
          scale:
            scale_min: 1
            scale_max: 5

    Args:
        path: Path to the config YAML file

    Returns:
        EstimatorConfig loaded from the file, or defaults if file doesn't exist

    Raises:
        ConfigError: If the file is not valid YAML or the section is not a mapping
        pydantic.ValidationError: If a value fails validation
    """
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        return EstimatorConfig()
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return EstimatorConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping at the top level of {path}")

    estimator_data = data.get("estimator") or {}
    if not isinstance(estimator_data, dict):
        raise ConfigError(f"'estimator' section in {path} must be a mapping")
    return EstimatorConfig(**estimator_data)
