import pytest
from pydantic import ValidationError
from wss_engine.core.component import Component

class Counter(Component):
    value: int = 0
    label: str = ""

def test_component_defaults():
    c = Counter()
    assert c.value == 0
    assert c.label == ""

def test_component_validation():
    with pytest.raises(ValidationError):
        Counter(value={"invalid": "type"})

def test_component_validates_on_assignment():
    c = Counter()
    with pytest.raises(ValidationError):
        c.value = [1, 2]

def test_component_forbids_extra_fields():
    with pytest.raises(ValidationError):
        Counter(unknown=1)
