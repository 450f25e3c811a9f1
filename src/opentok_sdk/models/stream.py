"""
Stream models: v2/project/<key>/session/<sid>/stream.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Stream(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    name: Optional[str] = None
    video_type: Optional[str] = None  # "camera" | "screen"
    layout_class_list: list[str] = []


class StreamList(BaseModel):
    count: int = 0
    items: list[Stream] = []

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> Stream:
        return self.items[index]
