"""Shared fixtures: a small Figma document and node helpers."""

import pytest

from messages.design_messages import DesignNode


@pytest.fixture
def sample_file_response():
    """Trimmed /v1/files/:key response with one main frame."""
    return {
        "name": "Demo",
        "document": {
            "id": "0:0",
            "name": "Document",
            "type": "DOCUMENT",
            "children": [
                {
                    "id": "1:1",
                    "name": "Card",
                    "type": "FRAME",
                    "absoluteBoundingBox": {"x": 0, "y": 0, "width": 320, "height": 200},
                    "fills": [{"type": "SOLID", "color": {"r": 1, "g": 1, "b": 1, "a": 1}}],
                    "cornerRadius": 8,
                    "layoutMode": "VERTICAL",
                    "itemSpacing": 12,
                    "paddingLeft": 16,
                    "paddingRight": 16,
                    "paddingTop": 24,
                    "paddingBottom": 24,
                    "primaryAxisAlignItems": "MIN",
                    "counterAxisAlignItems": "CENTER",
                    "children": [
                        {
                            "id": "1:2",
                            "name": "Hero Image",
                            "type": "RECTANGLE",
                            "fills": [{"type": "IMAGE", "imageRef": "abc"}],
                            "absoluteBoundingBox": {"x": 16, "y": 24, "width": 288, "height": 120},
                        },
                        {
                            "id": "1:3",
                            "name": "Title",
                            "type": "TEXT",
                            "characters": "Hello",
                            "style": {
                                "fontFamily": "Inter",
                                "fontSize": 16,
                                "fontWeight": 600,
                                "lineHeightPx": 24,
                                "letterSpacing": 0,
                                "textAlignHorizontal": "LEFT",
                            },
                            "fills": [{"type": "SOLID", "color": {"r": 0, "g": 0, "b": 0, "a": 1}}],
                            "constraints": {"vertical": "TOP", "horizontal": "LEFT"},
                        },
                    ],
                },
                {"id": "9:9", "name": "Second page frame", "type": "FRAME"},
            ],
        },
    }


@pytest.fixture
def sample_frame(sample_file_response):
    return DesignNode.model_validate(sample_file_response["document"]["children"][0])


@pytest.fixture
def make_node():
    """DesignNode 构造器：make_node("Box", "RECTANGLE", cornerRadius=4)"""

    def _make(name=None, type_=None, children=None, **fields):
        data = dict(fields)
        if name is not None:
            data["name"] = name
        if type_ is not None:
            data["type"] = type_
        if children is not None:
            data["children"] = children
        return DesignNode.model_validate(data)

    return _make

