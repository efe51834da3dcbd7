"""GTK view for a block document."""

from __future__ import annotations

import logging
from typing import Optional

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("Gdk", "4.0")
from gi.repository import Gdk, GLib, GObject, Gtk  # type: ignore[import-not-found, attr-defined]

from block_model import Block
from block_registry import (
    CAPTIONED_IMAGE,
    CHECKBOX,
    MULTI_LINE,
    NO_INPUT,
    get_block_affordance,
)
from block_store import DOWN, UP, BlockStore
from editor import BlockActions, BlockEditor
from editor_state import CARET_END, CARET_START, InteractionState
from ui_key_input import event_to_token


logger = logging.getLogger(__name__)


def _structure(blocks: tuple[Block, ...]) -> tuple[tuple[str, str, bool | None, str | None], ...]:
    return tuple((block.id, block.type, block.checked, block.image_url) for block in blocks)


class BlockEditorView(Gtk.ScrolledWindow):
    def __init__(self, editor: BlockEditor) -> None:
        super().__init__()
        self.set_policy(Gtk.PolicyType.AUTOMATIC, Gtk.PolicyType.AUTOMATIC)
        self.set_hexpand(True)
        self.set_vexpand(True)

        self._editor = editor
        self._rows: dict[str, _BlockRow] = {}
        self._rendered: tuple = ()
        self._syncing = False
        self._insert_popover: Gtk.Popover | None = None
        self._slash_popover: Gtk.Popover | None = None

        self._column = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=4)
        self._column.set_margin_top(32)
        self._column.set_margin_bottom(160)
        self._column.set_margin_start(120)
        self._column.set_margin_end(120)
        self._column.set_valign(Gtk.Align.START)

        self._title = Gtk.Entry()
        self._title.set_placeholder_text("Untitled")
        self._title.add_css_class("title-2")
        self._title.connect("changed", self._on_title_changed)
        self._column.append(self._title)

        self._blocks_box = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=2)
        self._column.append(self._blocks_box)

        add_button = Gtk.Button(label="Add a block")
        add_button.set_halign(Gtk.Align.START)
        add_button.add_css_class("flat")
        add_button.connect("clicked", lambda _button: self._editor.append_block())
        self._column.append(add_button)

        self.set_child(self._column)

        editor.add_listener(self._on_commit)
        editor.state.add_listener(self._on_state_change)
        editor.attach_surface(self)
        self._render(editor.store)

    def focus_block(self, block_id: str, caret: Optional[str] = None) -> bool:
        row = self._rows.get(block_id)
        if row is None:
            return False
        return row.focus_input(caret)

    def _on_title_changed(self, entry: Gtk.Entry) -> None:
        if self._syncing:
            return
        self._editor.set_title(entry.get_text())

    def _on_commit(self, store: BlockStore) -> None:
        if _structure(store.blocks) != self._rendered:
            self._render(store)
        else:
            self._sync_contents(store)

    def _render(self, store: BlockStore) -> None:
        self._close_popovers()
        for child in list(self._blocks_box):
            self._blocks_box.remove(child)
        self._rows = {}
        for block in store.blocks:
            row = _BlockRow(self, block)
            self._rows[block.id] = row
            self._blocks_box.append(row)
        self._rendered = _structure(store.blocks)
        self._sync_contents(store)
        self._sync_menus(self._editor.state)

    def _sync_contents(self, store: BlockStore) -> None:
        self._syncing = True
        try:
            if self._title.get_text() != store.title:
                self._title.set_text(store.title)
            for block in store.blocks:
                row = self._rows.get(block.id)
                if row is None:
                    continue
                row.set_content(block.content)
                row.set_actions(self._editor.block_actions(block.id))
        finally:
            self._syncing = False

    def _on_state_change(self, state: InteractionState) -> None:
        self._sync_menus(state)

    def _sync_menus(self, state: InteractionState) -> None:
        insert_row = self._rows.get(state.insert_menu_block_id or "")
        if insert_row is None:
            self._popdown("_insert_popover")
        elif self._insert_popover is None or self._insert_popover.get_parent() is not insert_row.plus_button:
            self._popdown("_insert_popover")
            self._insert_popover = self._build_insert_popover(insert_row)
            self._insert_popover.popup()

        slash_row = self._rows.get(state.slash_menu_block_id or "")
        if slash_row is None:
            self._popdown("_slash_popover")
            return
        if self._slash_popover is None or self._slash_popover.get_parent() is not slash_row.content_anchor:
            self._popdown("_slash_popover")
            self._slash_popover = Gtk.Popover()
            self._slash_popover.set_autohide(False)
            self._slash_popover.set_parent(slash_row.content_anchor)
        self._fill_slash_popover(self._slash_popover)
        self._slash_popover.popup()

    def _build_insert_popover(self, row: "_BlockRow") -> Gtk.Popover:
        popover = Gtk.Popover()
        popover.set_parent(row.plus_button)
        box = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=2)
        for section in self._editor.insert_menu_entries():
            heading = Gtk.Label(label=section.title, xalign=0)
            heading.add_css_class("caption-heading")
            box.append(heading)
            for entry in section.entries:
                button = Gtk.Button()
                button.add_css_class("flat")
                label = Gtk.Label(xalign=0)
                label.set_markup(
                    f"<b>{GLib.markup_escape_text(entry.label)}</b>\n"
                    f"<small>{GLib.markup_escape_text(entry.description)}</small>"
                )
                button.set_child(label)
                button.connect("clicked", self._on_insert_entry, entry.block_type)
                box.append(button)
        popover.set_child(box)
        popover.connect("closed", self._on_insert_popover_closed, row.block_id)
        return popover

    def _fill_slash_popover(self, popover: Gtk.Popover) -> None:
        box = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=2)
        for entry in self._editor.slash_menu_entries():
            button = Gtk.Button(label=entry.label)
            button.add_css_class("flat")
            button.connect("clicked", self._on_slash_entry, entry.block_type)
            box.append(button)
        popover.set_child(box)

    def _on_insert_entry(self, _button: Gtk.Button, block_type: str) -> None:
        self._editor.select_insert_entry(block_type)

    def _on_slash_entry(self, _button: Gtk.Button, block_type: str) -> None:
        self._editor.select_slash_entry(block_type)

    def _on_insert_popover_closed(self, _popover: Gtk.Popover, block_id: str) -> None:
        if self._editor.state.insert_menu_block_id == block_id:
            self._editor.state.set_insert_menu(None)

    def _popdown(self, attr: str) -> None:
        popover = getattr(self, attr)
        if popover is None:
            return
        setattr(self, attr, None)
        popover.popdown()
        popover.unparent()

    def _close_popovers(self) -> None:
        self._popdown("_insert_popover")
        self._popdown("_slash_popover")

    @property
    def editor(self) -> BlockEditor:
        return self._editor

    @property
    def syncing(self) -> bool:
        return self._syncing


class _BlockRow(Gtk.Box):
    def __init__(self, view: BlockEditorView, block: Block) -> None:
        super().__init__(orientation=Gtk.Orientation.HORIZONTAL, spacing=6)
        self.add_css_class("block")
        self.add_css_class(f"block-{block.type}")
        self.block_id = block.id
        self._view = view
        self._editor = view.editor
        self._entry: Gtk.Entry | None = None
        self._text_view: Gtk.TextView | None = None

        grip = Gtk.Button.new_from_icon_name("list-drag-handle-symbolic")
        grip.add_css_class("flat")
        source = Gtk.DragSource()
        source.set_actions(Gdk.DragAction.MOVE)
        source.connect("prepare", self._on_drag_prepare)
        source.connect("drag-begin", self._on_drag_begin)
        source.connect("drag-end", self._on_drag_end)
        grip.add_controller(source)
        self.append(grip)

        self.plus_button = Gtk.Button.new_from_icon_name("list-add-symbolic")
        self.plus_button.add_css_class("flat")
        self.plus_button.connect("clicked", self._on_plus_clicked)
        self.append(self.plus_button)

        self.content_anchor = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=4)
        self.content_anchor.set_hexpand(True)
        self._build_content(block)
        self.append(self.content_anchor)

        self._up = self._action_button("go-up-symbolic", lambda: self._editor.move(self.block_id, UP))
        self._down = self._action_button("go-down-symbolic", lambda: self._editor.move(self.block_id, DOWN))
        self._action_button("edit-copy-symbolic", lambda: self._editor.duplicate(self.block_id))
        self._delete = self._action_button("user-trash-symbolic", lambda: self._editor.delete(self.block_id))

        target = Gtk.DropTarget.new(GObject.TYPE_STRING, Gdk.DragAction.MOVE)
        target.connect("motion", self._on_drag_motion)
        target.connect("drop", self._on_drop)
        self.add_controller(target)

    def _build_content(self, block: Block) -> None:
        affordance = get_block_affordance(block.type)
        if affordance.input_shape == NO_INPUT:
            separator = Gtk.Separator(orientation=Gtk.Orientation.HORIZONTAL)
            separator.set_margin_top(12)
            separator.set_margin_bottom(12)
            self.content_anchor.append(separator)
            return

        line = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL, spacing=6)
        if affordance.extra_controls == CHECKBOX:
            check = Gtk.CheckButton()
            check.set_active(bool(block.checked))
            check.connect("toggled", self._on_check_toggled)
            line.append(check)
        if affordance.extra_controls == CAPTIONED_IMAGE:
            url = Gtk.Label(label=block.image_url or "", xalign=0)
            url.add_css_class("dim-label")
            self.content_anchor.append(url)

        if affordance.input_shape == MULTI_LINE:
            self._text_view = Gtk.TextView()
            self._text_view.set_hexpand(True)
            self._text_view.set_wrap_mode(Gtk.WrapMode.WORD_CHAR)
            self._text_view.set_monospace(block.type == "code")
            self._text_view.set_tooltip_text(affordance.placeholder)
            self._text_view.set_size_request(-1, 22 * affordance.rows)
            self._text_view.get_buffer().set_text(block.content)
            self._text_view.get_buffer().connect("changed", self._on_buffer_changed)
            input_widget: Gtk.Widget = self._text_view
        else:
            self._entry = Gtk.Entry()
            self._entry.set_hexpand(True)
            self._entry.set_placeholder_text(affordance.placeholder)
            self._entry.set_text(block.content)
            self._entry.connect("changed", self._on_entry_changed)
            input_widget = self._entry
        keys = Gtk.EventControllerKey()
        keys.set_propagation_phase(Gtk.PropagationPhase.CAPTURE)
        keys.connect("key-pressed", self._on_key_pressed)
        input_widget.add_controller(keys)
        focus = Gtk.EventControllerFocus()
        focus.connect("enter", lambda _controller: self._editor.focus_entered(self.block_id))
        focus.connect("leave", lambda _controller: self._editor.focus_left(self.block_id))
        input_widget.add_controller(focus)
        line.append(input_widget)
        self.content_anchor.append(line)

    def _action_button(self, icon: str, callback) -> Gtk.Button:
        button = Gtk.Button.new_from_icon_name(icon)
        button.add_css_class("flat")
        button.connect("clicked", lambda _button: callback())
        self.append(button)
        return button

    def set_actions(self, actions: BlockActions) -> None:
        self._up.set_sensitive(actions.can_move_up)
        self._down.set_sensitive(actions.can_move_down)
        self._delete.set_sensitive(actions.can_delete)

    def set_content(self, content: str) -> None:
        if self._entry is not None and self._entry.get_text() != content:
            self._entry.set_text(content)
        if self._text_view is not None:
            buffer = self._text_view.get_buffer()
            current = buffer.get_text(buffer.get_start_iter(), buffer.get_end_iter(), False)
            if current != content:
                buffer.set_text(content)

    def focus_input(self, caret: Optional[str]) -> bool:
        if self._entry is not None:
            self._entry.grab_focus()
            if caret == CARET_START:
                self._entry.set_position(0)
            elif caret == CARET_END:
                self._entry.set_position(-1)
            return True
        if self._text_view is not None:
            self._text_view.grab_focus()
            buffer = self._text_view.get_buffer()
            if caret == CARET_START:
                buffer.place_cursor(buffer.get_start_iter())
            elif caret == CARET_END:
                buffer.place_cursor(buffer.get_end_iter())
            return True
        return False

    def _on_entry_changed(self, entry: Gtk.Entry) -> None:
        if self._view.syncing:
            return
        self._editor.update(self.block_id, entry.get_text())

    def _on_buffer_changed(self, buffer: Gtk.TextBuffer) -> None:
        if self._view.syncing:
            return
        text = buffer.get_text(buffer.get_start_iter(), buffer.get_end_iter(), False)
        self._editor.update(self.block_id, text)

    def _on_key_pressed(self, _controller, keyval: int, _keycode: int, state: Gdk.ModifierType) -> bool:
        return self._editor.handle_key(self.block_id, event_to_token(keyval, state))

    def _on_check_toggled(self, _check: Gtk.CheckButton) -> None:
        self._editor.toggle_checked(self.block_id)

    def _on_plus_clicked(self, _button: Gtk.Button) -> None:
        self._editor.toggle_insert_menu(self.block_id)

    def _on_drag_prepare(self, _source: Gtk.DragSource, _x: float, _y: float) -> Gdk.ContentProvider:
        return Gdk.ContentProvider.new_for_value(self.block_id)

    def _on_drag_begin(self, _source: Gtk.DragSource, _drag: Gdk.Drag) -> None:
        self._editor.drag_start(self.block_id)

    def _on_drag_end(self, _source: Gtk.DragSource, _drag: Gdk.Drag, _delete: bool) -> None:
        self._editor.drag_end()

    def _on_drag_motion(self, _target: Gtk.DropTarget, _x: float, _y: float) -> Gdk.DragAction:
        if self._editor.drag_over(self.block_id):
            return Gdk.DragAction.MOVE
        return Gdk.DragAction(0)

    def _on_drop(self, _target: Gtk.DropTarget, _value: str, _x: float, _y: float) -> bool:
        self._editor.drop(self.block_id)
        return True
