# 📄 File: marketplace/modules/support/domain/models/setting.py
# 🧭 Purpose (Layman Explanation):
# Switches and values admins can change at runtime, such as the site name or whether a
# feature is turned on.
# 🧪 Purpose (Technical Summary):
# Setting entity: unique dotted key, JSON value with a declared value type, module,
# scope and environment, plus a sensitivity flag used to mask secrets.
# 🔗 Dependencies:
# pydantic, marketplace.shared.domain
# 🔄 Connected Modules / Calls From:
# support SettingRepository (get_value / set_value), admin tooling

import uuid
from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import Field, field_validator, model_validator

from marketplace.shared.domain.base import SoftDeletableModel

MASKED_VALUE = "********"


class SettingValueType(str, Enum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    JSON = "json"
    ARRAY = "array"

    @classmethod
    def infer(cls, value: Any) -> "SettingValueType":
        # bool before number: bool is an int subclass
        if isinstance(value, bool):
            return cls.BOOLEAN
        if isinstance(value, (int, float)):
            return cls.NUMBER
        if isinstance(value, str):
            return cls.STRING
        if isinstance(value, (list, tuple)):
            return cls.ARRAY
        return cls.JSON


class SettingScope(str, Enum):
    GLOBAL = "global"
    MODULE = "module"
    TENANT = "tenant"


class SettingEnvironment(str, Enum):
    DEV = "dev"
    STAGING = "staging"
    PROD = "prod"


class Setting(SoftDeletableModel):
    """
    Runtime setting, e.g. site.name, payment.gateway, feature.cinema_enabled.
    """

    key: str = Field(min_length=1, max_length=150)
    value: Any
    value_type: SettingValueType
    module: Optional[str] = Field(None, max_length=40)
    scope: SettingScope = SettingScope.GLOBAL
    environment: SettingEnvironment = SettingEnvironment.PROD
    is_active: bool = True
    is_sensitive: bool = False
    updated_by: Optional[uuid.UUID] = None
    updated_at_by_admin: Optional[datetime] = None
    description: Optional[str] = None

    @field_validator("key")
    @classmethod
    def normalize_key(cls, v: str) -> str:
        return v.strip()

    @model_validator(mode="before")
    @classmethod
    def default_value_type(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("value_type") and "value" in data:
            data = {**data, "value_type": SettingValueType.infer(data["value"])}
        return data

    @property
    def display_value(self) -> Any:
        return MASKED_VALUE if self.is_sensitive else self.value
