"""
Engine module - the decision pipeline stages
"""
from .language_detector import LanguageDetector
from .normalizer import Normalizer
from .classifier import RequestClassifier, PriorityResolver, CATEGORY_RULES, PRIORITY_RULES
from .completeness import CompletenessChecker
from .title_builder import TitleBuilder
from .request_assembler import RequestAssembler
from .general_responder import GeneralResponder
from .resolvers import (
    Resolution,
    StageResolver,
    ClassificationResolver,
    ExtractionResolver,
    FollowUpResolver,
    ConfirmationResolver
)
from .conversation import ConversationController

__all__ = [
    'LanguageDetector',
    'Normalizer',
    'RequestClassifier',
    'PriorityResolver',
    'CATEGORY_RULES',
    'PRIORITY_RULES',
    'CompletenessChecker',
    'TitleBuilder',
    'RequestAssembler',
    'GeneralResponder',
    'Resolution',
    'StageResolver',
    'ClassificationResolver',
    'ExtractionResolver',
    'FollowUpResolver',
    'ConfirmationResolver',
    'ConversationController'
]
