"""Named scenes, switching between them, and the game's two scenes."""

from __future__ import annotations

import threading
from collections import deque
from collections.abc import Callable
from typing import Any

from tilemerge.board import DEFAULT_HEIGHT, DEFAULT_WIDTH, Board, Direction, IntSource

GAME_SCENE = "gameScene"
GAME_OVER_SCENE = "gameOverScene"
GAME_OVER_TEXT = "Game Over"


class Scene:
    """A screen of the game; subclasses override the hooks they need."""

    active: bool = False

    def init(self) -> None:
        """Prepare the scene before it becomes current; raise on failure."""
        self.active = True

    def release(self) -> None:
        """Free what the scene holds when it stops being current."""
        self.active = False

    def update(self) -> None:
        """Advance the scene by one frame."""

    def render(self) -> Any:
        """Produce what the scene shows."""
        return None


class SceneManager:
    """Keeps scenes by name and runs the current one."""

    def __init__(self) -> None:
        self._scenes: dict[str, Scene] = {}
        self._loading_scenes: dict[str, Scene] = {}
        self._current: Scene | None = None
        self._ready: Scene | None = None
        self._loading: Scene | None = None
        self._lock = threading.Lock()
        self._loader: threading.Thread | None = None
        self._loader_error: BaseException | None = None

    @property
    def current(self) -> Scene | None:
        with self._lock:
            return self._current

    @property
    def scenes(self) -> dict[str, Scene]:
        return dict(self._scenes)

    def add_scene(self, name: str, scene: Scene) -> Scene:
        """Register a scene; a name already taken keeps its first scene."""
        if scene is None:
            raise ValueError("scene must not be None")
        self._scenes.setdefault(name, scene)
        return scene

    def add_loading_scene(self, name: str, scene: Scene) -> Scene:
        """Register a scene shown while another one is being prepared."""
        if scene is None:
            raise ValueError("scene must not be None")
        self._scenes.setdefault(name, scene)
        self._loading_scenes.setdefault(name, scene)
        return scene

    def change_scene(self, name: str) -> bool:
        """Make the named scene current.

        Returns False when it already is. Raises KeyError for an unknown
        name; an exception from the new scene's init leaves things as they were.
        """
        target = self._scenes[name]
        if target is self.current:
            return False
        target.init()
        with self._lock:
            previous = self._current
            self._current = target
        if previous is not None:
            previous.release()
        return True

    def change_scene_with_loading(self, name: str, loading_name: str) -> bool:
        """Show a loading scene while the named scene is prepared in the background.

        If no loading scene has that name, switch straight to loading_name.
        """
        target = self._scenes[name]
        if target is self.current:
            return False
        loading = self._loading_scenes.get(loading_name)
        if loading is None:
            return self.change_scene(loading_name)
        loading.init()
        with self._lock:
            previous = self._current
            self._current = loading
            self._loading = loading
            self._ready = target
        if previous is not None:
            previous.release()
        self._loader_error = None
        self._loader = threading.Thread(target=self._load_ready_scene, daemon=True)
        self._loader.start()
        return True

    def _load_ready_scene(self) -> None:
        try:
            with self._lock:
                ready = self._ready
                loading = self._loading
            if ready is None:
                return
            ready.init()
            with self._lock:
                self._current = ready
                self._loading = None
                self._ready = None
            if loading is not None:
                loading.release()
        except BaseException as error:  # surfaced by wait_for_loading
            self._loader_error = error

    def wait_for_loading(self, timeout: float | None = None) -> None:
        """Block until background preparation ends, re-raising its error."""
        if self._loader is not None:
            self._loader.join(timeout)
        if self._loader_error is not None:
            error, self._loader_error = self._loader_error, None
            raise error

    def update(self) -> None:
        scene = self.current
        if scene is not None:
            scene.update()

    def render(self) -> Any:
        scene = self.current
        if scene is None:
            return None
        return scene.render()

    def release(self) -> None:
        """Release the current scene and forget every scene."""
        current = self.current
        if current is not None:
            current.release()
        self._scenes.clear()
        self._loading_scenes.clear()
        with self._lock:
            self._current = None
            self._ready = None
            self._loading = None


class GameScene(Scene):
    """The playing field: takes moves, animates units, ends when full."""

    def __init__(
        self,
        manager: SceneManager,
        rng: IntSource,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        elapsed_time: Callable[[], float] | None = None,
        game_over_scene: str = GAME_OVER_SCENE,
    ):
        self.manager = manager
        self.rng = rng
        self.width = width
        self.height = height
        self.elapsed_time = elapsed_time or (lambda: 0.0)
        self.game_over_scene = game_over_scene
        self.board: Board | None = None
        self._pending: deque[Direction] = deque()

    def init(self) -> None:
        super().init()
        self.board = Board(self.rng, self.width, self.height)
        self._pending.clear()

    def push_direction(self, direction: Direction) -> None:
        """Queue a move to be made on the next update."""
        self._pending.append(direction)

    def update(self) -> None:
        if self.board is None:
            raise RuntimeError("game scene used before init")
        while self._pending:
            self.board.move(self._pending.popleft())
        self.board.update(self.elapsed_time())
        if self.board.is_full():
            self.manager.change_scene(self.game_over_scene)

    def render(self) -> tuple[tuple[int, ...], ...]:
        if self.board is None:
            raise RuntimeError("game scene used before init")
        return self.board.numbers()


class GameOverScene(Scene):
    """The closing screen."""

    def render(self) -> str:
        return GAME_OVER_TEXT