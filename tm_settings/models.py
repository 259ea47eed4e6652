from dataclasses import dataclass, field
from typing import List

@dataclass
class SettingRow:
    key: str
    value: str
    description: str = ""
    type: str = ""

@dataclass
class ClaudeConfig:
    api_key: str
    model: str
    max_tokens: float

@dataclass
class ProfitThresholds:
    minimum: float
    target: float
    exceptional: float

@dataclass
class AutomationConfig:
    enable_ai: bool
    enable_auto_messaging: bool
    auto_contact_threshold: float
    auto_reject_blacklisted: bool
    auto_reject_icloud_locked: bool

@dataclass
class GeographicConfig:
    max_radius_miles: float
    preferred_zips: List[str] = field(default_factory=list)
    base_zip: str = ""
