"""Editor application: run loop, key dispatch and frame rendering."""

from mim.cli.studio.controller import InputController
from mim.cli.studio.editor import EditorApp, run_editor
from mim.cli.studio.renderer import Renderer

__all__ = ["InputController", "EditorApp", "run_editor", "Renderer"]
