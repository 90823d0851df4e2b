"""Window geometry for the board, the preview pane and the stats panel"""
from dataclasses import dataclass

from tetris_config import CONFIG, CANVAS_WIDTH, CANVAS_HEIGHT, PREVIEW_WIDTH, PREVIEW_HEIGHT


@dataclass
class Dims:
    scale: int
    margin: int
    board_w: int
    board_h: int
    panel_x: int
    panel_y: int
    preview_w: int
    preview_h: int
    total_w: int
    total_h: int
    board_x: int
    board_y: int


def compute_dims() -> Dims:
    scale = max(1, int(CONFIG["DISPLAY_SCALE"]))
    margin = 16

    board_w = CANVAS_WIDTH * scale
    board_h = CANVAS_HEIGHT * scale
    preview_w = PREVIEW_WIDTH * scale
    preview_h = PREVIEW_HEIGHT * scale

    board_x = margin
    board_y = margin
    panel_x = board_x + board_w + margin
    panel_y = margin

    total_w = panel_x + preview_w + margin
    total_h = margin + board_h + margin

    return Dims(
        scale=scale, margin=margin,
        board_w=board_w, board_h=board_h,
        panel_x=panel_x, panel_y=panel_y,
        preview_w=preview_w, preview_h=preview_h,
        total_w=total_w, total_h=total_h,
        board_x=board_x, board_y=board_y,
    )
