"""A small entity-component system."""

from __future__ import annotations

from typing import Iterator, TypeVar

from .vector2d import Vector2D

C = TypeVar("C", bound="Component")


class Component:
    """Base class for behaviour attached to an entity."""

    entity: Entity | None = None

    def init(self) -> None:
        """Called once the component has been attached to its entity."""

    def update(self) -> None:
        """Advance the component by one frame."""

    def draw(self, surface) -> None:
        """Draw the component onto ``surface``."""


class Entity:
    """A container of components that update and draw together."""

    def __init__(self) -> None:
        self._active = True
        self._components: list[Component] = []

    def __iter__(self) -> Iterator[Component]:
        return iter(self._components)

    def __len__(self) -> int:
        return len(self._components)

    def update(self) -> None:
        for component in self._components:
            component.update()

    def draw(self, surface) -> None:
        for component in self._components:
            component.draw(surface)

    def is_active(self) -> bool:
        return self._active

    def destroy(self) -> None:
        self._active = False

    def add_component(self, component: C) -> C:
        """Attach ``component``, initialise it and return it."""
        component.entity = self
        self._components.append(component)
        component.init()
        return component

    def get_component(self, component_type: type[C]) -> C | None:
        """Return the first component of ``component_type``, or None."""
        return next(
            (c for c in self._components if isinstance(c, component_type)), None
        )


class Manager:
    """Owns the entities of a scene."""

    def __init__(self) -> None:
        self._entities: list[Entity] = []

    def __iter__(self) -> Iterator[Entity]:
        return iter(self._entities)

    def __len__(self) -> int:
        return len(self._entities)

    def create_entity(self) -> Entity:
        entity = Entity()
        self._entities.append(entity)
        return entity

    def update(self) -> None:
        for entity in self._entities:
            entity.update()

    def draw(self, surface) -> None:
        for entity in self._entities:
            entity.draw(surface)

    def refresh(self) -> None:
        """Drop entities that have been destroyed."""
        self._entities = [e for e in self._entities if e.is_active()]


class PositionComponent(Component):
    """Holds an entity's position in pixels."""

    def __init__(self, position: Vector2D) -> None:
        self.position = position

    @property
    def x(self) -> int:
        return self.position.x

    @x.setter
    def x(self, value: int) -> None:
        self.position = Vector2D(value, self.position.y)

    @property
    def y(self) -> int:
        return self.position.y

    @y.setter
    def y(self, value: int) -> None:
        self.position = Vector2D(self.position.x, value)

    def set_pos(self, x: int, y: int) -> None:
        self.position = Vector2D(x, y)