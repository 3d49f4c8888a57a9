from sprite_engine import config


def test_canvas_fits_default_window_at_whole_scale():
    # Default window should show the canvas at an integer upscale
    assert config.WINDOW_WIDTH % config.CANVAS_WIDTH == 0
    assert config.WINDOW_WIDTH // config.CANVAS_WIDTH == (
        config.WINDOW_HEIGHT // config.CANVAS_HEIGHT
    )


def test_clear_color_is_transparent():
    assert len(config.CLEAR_COLOR) == 4
    assert config.CLEAR_COLOR[3] == 0


def test_button_bits_are_distinct_flags():
    bits = list(config.POINTER_BUTTON_BITS.values())
    assert sorted(bits) == [1, 2, 4]
