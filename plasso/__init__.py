"""
Client library for the Plasso billing/membership platform (Flexkit).
"""
from .config import PlassoConfig, load_plasso_config
from .integrations import *  # noqa: F401,F403
from .integrations import __all__ as _integrations_all

__all__ = ["PlassoConfig", "load_plasso_config", *_integrations_all]
