"""Global pytest configuration and shared scene fixtures."""

from __future__ import annotations

import pytest

from scenepath.config import NAV_CONFIG
from scenepath.scene import ClassRegistry, Instance

SCENE_YAML = """
classes:
  Tool: Instance
  Sword: Tool
scene:
  class: DataModel
  name: game
  children:
    - class: Workspace
      children:
        - {class: Part, name: Baseplate}
        - class: Model
          name: House
          children:
            - {class: Folder, name: Furniture, children: [{class: MeshPart, name: Chair}]}
            - {class: Part, name: Door}
    - class: Folder
      name: ReplicatedStorage
      children:
        - {class: Sword, name: Excalibur}
        - {class: ModuleScript, name: Util}
"""


@pytest.fixture
def registry() -> ClassRegistry:
    """Fresh default registry so tests can register classes freely."""
    return ClassRegistry.default()


@pytest.fixture
def game(registry: ClassRegistry) -> Instance:
    """Small scene: game > Workspace > {Baseplate, House > {Furniture > Chair, Door}}."""
    root = Instance("DataModel", "game", registry=registry)
    workspace = Instance("Workspace", parent=root, registry=registry)
    Instance("Part", "Baseplate", parent=workspace, registry=registry)
    house = Instance("Model", "House", parent=workspace, registry=registry)
    furniture = Instance("Folder", "Furniture", parent=house, registry=registry)
    Instance("MeshPart", "Chair", parent=furniture, registry=registry)
    Instance("Part", "Door", parent=house, registry=registry)
    return root


@pytest.fixture
def scene_file(tmp_path):
    path = tmp_path / "scene.yaml"
    path.write_text(SCENE_YAML)
    return path


@pytest.fixture(autouse=True)
def _restore_nav_config():
    """Undo per-test changes to the global navigation config."""
    saved = (
        NAV_CONFIG.delimiter,
        NAV_CONFIG.wait_timeout,
        NAV_CONFIG.infinite_yield_warning,
    )
    yield
    (
        NAV_CONFIG.delimiter,
        NAV_CONFIG.wait_timeout,
        NAV_CONFIG.infinite_yield_warning,
    ) = saved
