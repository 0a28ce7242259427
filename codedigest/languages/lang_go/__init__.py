from .config import LANGUAGE_CONFIG, go_selectors, type_declaration_rule

__all__ = ['LANGUAGE_CONFIG', 'go_selectors', 'type_declaration_rule']
