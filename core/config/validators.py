"""
Configuration Validators
========================

Startup validation for the storefront configuration layer.
Raises ImproperlyConfigured for critical issues in production,
logs warnings in development.

Called automatically via core.apps.CoreConfig.ready().
"""

import logging
from django.core.exceptions import ImproperlyConfigured

logger = logging.getLogger(__name__)


def validate_config_on_startup(app_config=None):
    """
    Validate all configuration on application startup.

    Production:
        CRITICAL issues raise ImproperlyConfigured (hard failure).
        WARNING issues are logged but don't block startup.

    Development:
        All issues are logged as warnings/info.
    """
    if app_config is None:
        from storefront.config import config as app_config

    issues = app_config.validate()

    if not issues:
        logger.info("Configuration validated — no issues found")
        app_config.log_status()
        return

    critical_issues = [i for i in issues if i.startswith("CRITICAL")]
    warning_issues = [i for i in issues if i.startswith("WARNING")]
    info_issues = [i for i in issues if i.startswith("INFO")]

    for issue in info_issues:
        logger.info(issue)
    for issue in warning_issues:
        logger.warning(issue)
    for issue in critical_issues:
        logger.critical(issue)

    if app_config.is_production and critical_issues:
        raise ImproperlyConfigured(
            "Configuration validation failed in production:\n"
            + "\n".join(f"  • {i}" for i in critical_issues)
        )

    app_config.log_status()
