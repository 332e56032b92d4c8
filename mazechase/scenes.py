"""Scenes and the manager that switches between them."""

from __future__ import annotations


class Scene:
    """A screen of the game; ``init`` raises to refuse being entered.

    The base class keeps track of whether it is active and how many frames
    it has updated and rendered since it was last entered.
    """

    active: bool = False
    frames: int = 0
    renders: int = 0

    def init(self) -> None:
        """Prepare the scene before it becomes current."""
        self.active = True
        self.frames = 0
        self.renders = 0

    def release(self) -> None:
        """Free what the scene holds when it stops being current."""
        self.active = False

    def update(self) -> None:
        """Advance the scene by one frame."""
        self.frames += 1

    def render(self) -> None:
        """Draw the scene."""
        self.renders += 1


class SceneManager:
    """Keeps named scenes and runs the current one."""

    def __init__(self) -> None:
        self._scenes: dict[str, Scene] = {}
        self.current: Scene | None = None

    def add_scene(self, name: str, scene: Scene | None) -> Scene | None:
        """Register ``scene`` under ``name``; an existing name keeps its scene."""
        if scene is None:
            return None
        self._scenes.setdefault(name, scene)
        return scene

    def change_scene(self, name: str) -> Scene:
        """Make the named scene current, initialising it first.

        Raises KeyError for an unknown name; an exception from the scene's
        ``init`` leaves the current scene in place.
        """
        scene = self._scenes[name]
        if scene is self.current:
            return scene
        scene.init()
        if self.current is not None:
            self.current.release()
        self.current = scene
        return scene

    def update(self) -> None:
        if self.current is not None:
            self.current.update()

    def render(self) -> None:
        if self.current is not None:
            self.current.render()

    def release(self) -> None:
        """Release the current scene and forget all scenes."""
        for scene in self._scenes.values():
            if scene is self.current:
                scene.release()
        self._scenes.clear()
        self.current = None

    def __contains__(self, name: object) -> bool:
        return name in self._scenes