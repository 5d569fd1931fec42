"""sharpcheck rule catalog: ten independent text heuristics for C# files."""

from .documentation import DocumentationRule
from .duplication import DuplicateBlockRule
from .literals import MagicNumberRule
from .naming import MediaAttributeRule, MethodNamingRule, PublicStaticFieldRule
from .presence import CollectionPresenceRule, LoopPresenceRule, SubroutinePresenceRule
from .spacing import SubroutineSpacingRule

# Execution order; RULE_ID ascends with position
ALL_RULE_CLASSES = (
    MethodNamingRule,
    PublicStaticFieldRule,
    MediaAttributeRule,
    DuplicateBlockRule,
    CollectionPresenceRule,
    LoopPresenceRule,
    MagicNumberRule,
    SubroutineSpacingRule,
    DocumentationRule,
    SubroutinePresenceRule,
)

RULES_BY_ID = {cls.RULE_ID: cls for cls in ALL_RULE_CLASSES}

__all__ = [
    "ALL_RULE_CLASSES",
    "RULES_BY_ID",
    "MethodNamingRule",
    "PublicStaticFieldRule",
    "MediaAttributeRule",
    "DuplicateBlockRule",
    "CollectionPresenceRule",
    "LoopPresenceRule",
    "MagicNumberRule",
    "SubroutineSpacingRule",
    "DocumentationRule",
    "SubroutinePresenceRule",
]
