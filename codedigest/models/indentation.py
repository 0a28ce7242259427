from typing import Literal

from pydantic import BaseModel, Field


class Indentation(BaseModel):
    """Indentation unit used inside elision placeholders."""
    style: Literal['tabs', 'spaces'] = 'tabs'
    width: int = Field(default=4, ge=1)
    model_config = {'frozen': True}

    @classmethod
    def tabs(cls) -> 'Indentation':
        return cls(style='tabs', width=1)

    @classmethod
    def spaces(cls, width: int = 4) -> 'Indentation':
        return cls(style='spaces', width=width)

    @property
    def unit(self) -> str:
        if self.style == 'tabs':
            return '\t'
        return ' ' * self.width
