from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Tuple


@dataclass(frozen=True)
class Post:
    """Un artículo publicado, construido a partir de un fichero .md"""

    url: str
    title: str
    tags: Tuple[str, ...]
    date: Optional[datetime]
    preview: str
    body: str
    path: str = field(default="", compare=False, repr=False)

    def has_tag(self, tag: str) -> bool:
        return tag in self.tags
