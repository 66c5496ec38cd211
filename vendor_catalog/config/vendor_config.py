"""
Vendor endpoint configuration for the vendor catalog engine.
"""
import os
from typing import Dict, Any
from vendor_catalog.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)


def _with_env_overrides(prefix: str, default_config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Override each key of a default configuration with <PREFIX>_<KEY> when set.

    Args:
        prefix (str): Environment variable prefix, e.g. "SANMAR"
        default_config (Dict[str, Any]): Default values

    Returns:
        Dict[str, Any]: The resolved configuration
    """
    config = {}
    for key in default_config:
        env_key = f"{prefix}_{key.upper()}"
        config[key] = os.environ.get(env_key, default_config[key])
    return config


def get_sanmar_config() -> Dict[str, Any]:
    """
    Get SanMar SOAP configuration from environment variables or defaults.

    Returns:
        Dict[str, Any]: SanMar configuration dictionary
    """
    default_config = {
        "product_info_endpoint": "https://ws.sanmar.com:8080/SanMarWebService/SanMarProductInfoServicePort",
        "namespace": "http://impl.webservice.integration.sanmar.com/",
        "style_operation": "getProductInfoByStyle",
        "brand_operation": "getProductInfoByBrand",
    }

    config = _with_env_overrides("SANMAR", default_config)
    logger.debug(f"Using SanMar config with endpoint: {config['product_info_endpoint']}")

    return config


def get_ssactivewear_config() -> Dict[str, Any]:
    """
    Get S&S Activewear REST configuration from environment variables or defaults.

    Returns:
        Dict[str, Any]: S&S Activewear configuration dictionary
    """
    default_config = {
        "base_url": "https://api.ssactivewear.com/V2",
        "products_path": "/products/",
        "style_parameter": "style",
        "brand_parameter": "brand",
    }

    config = _with_env_overrides("SSACTIVEWEAR", default_config)
    logger.debug(f"Using S&S Activewear config with base URL: {config['base_url']}")

    return config


# SOAP envelope namespace shared by SOAP 1.1 vendors
SOAP_ENVELOPE_NAMESPACE = "http://schemas.xmlsoap.org/soap/envelope/"
