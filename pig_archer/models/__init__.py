from pig_archer.models.entity import DrawTarget, Entity
from pig_archer.models.pig import Pig
from pig_archer.models.arrow import Arrow
from pig_archer.models.wolf import Wolf, WolfEvent

__all__ = [
    "DrawTarget", "Entity",
    "Pig", "Arrow",
    "Wolf", "WolfEvent",
]
