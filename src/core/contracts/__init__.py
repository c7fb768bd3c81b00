"""
Contract Validation Module

Модуль для валидации JSON-контрактов на границе расчётного ядра.
"""

from .validators import (
    ContractValidator,
    CurrencyConversionValidator,
    DistanceRequestValidator,
    GeoCoordinateValidator,
    MailMessageValidator,
    SchemaLoader,
    get_schema_loader,
    validate_currency_conversion,
    validate_distance_request,
    validate_geo_coordinate,
    validate_mail_message,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "GeoCoordinateValidator",
    "DistanceRequestValidator",
    "CurrencyConversionValidator",
    "MailMessageValidator",
    # Functions
    "get_schema_loader",
    "validate_geo_coordinate",
    "validate_distance_request",
    "validate_currency_conversion",
    "validate_mail_message",
]
