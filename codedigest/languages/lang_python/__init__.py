from .config import (
    LANGUAGE_CONFIG,
    class_definition_rule,
    decorated_definition_rule,
    expression_statement_rule,
    python_selectors,
)

__all__ = [
    'LANGUAGE_CONFIG',
    'class_definition_rule',
    'decorated_definition_rule',
    'expression_statement_rule',
    'python_selectors',
]
