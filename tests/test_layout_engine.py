"""Tests for the grid layout engine."""

import pytest
from responsive_grid.design.responsive import Breakpoint
from responsive_grid.layout import (
    ConfigurationError,
    GridConfiguration,
    GridLayoutEngine,
    compute_cell_width,
)


@pytest.fixture
def engine():
    return GridLayoutEngine()


def test_default_configuration_standard_phone(engine):
    result = engine.layout(12, 375, GridConfiguration())
    assert result.breakpoint is Breakpoint.SM
    assert result.column_count == 4
    assert result.cell_width == 93
    assert result.item_count == 12
    assert result.row_count == 3


def test_config_defaults_when_omitted(engine):
    assert engine.layout(12, 375) == engine.layout(12, 375, GridConfiguration())


@pytest.mark.parametrize("padding", [0, 5, 12.5])
def test_custom_configuration_single_column(engine, padding):
    cfg = GridConfiguration(
        columns_for_breakpoint={Breakpoint.XS: 1, Breakpoint.SM: 2}, padding=padding
    )
    result = engine.layout(3, 300, cfg)
    assert result.breakpoint is Breakpoint.XS
    assert result.column_count == 1
    assert result.cell_width == 300 - 2 * padding


def test_missing_breakpoint_uses_one_column(engine):
    cfg = GridConfiguration(columns_for_breakpoint={Breakpoint.XS: 1, Breakpoint.SM: 2})
    result = engine.layout(2, 1500, cfg)
    assert result.breakpoint is Breakpoint.XXL
    assert result.column_count == 1
    assert result.cell_width == 1500


def test_spacing_and_padding(engine):
    cfg = GridConfiguration(column_spacing=10, padding=20)
    # lg -> 6 columns: (800 - 40 - 50) / 6
    result = engine.layout(1, 800, cfg)
    assert result.column_count == 6
    assert result.cell_width == pytest.approx(710 / 6)
    assert compute_cell_width(800, 6, cfg) == result.cell_width


def test_zero_columns_raises_configuration_error(engine):
    cfg = GridConfiguration(columns_for_breakpoint={Breakpoint.SM: 0})
    with pytest.raises(ConfigurationError) as info:
        engine.layout(4, 400, cfg)
    assert info.value.context == {"breakpoint": "sm", "column_count": 0}


def test_negative_columns_raise(engine):
    cfg = GridConfiguration(columns_for_breakpoint={Breakpoint.XS: -2})
    with pytest.raises(ConfigurationError):
        engine.layout(1, 100, cfg)


def test_invalid_column_for_inactive_breakpoint_is_ignored(engine):
    cfg = GridConfiguration(columns_for_breakpoint={Breakpoint.XS: 0, Breakpoint.SM: 2})
    assert engine.layout(2, 400, cfg).column_count == 2


def test_non_integer_column_count_raises(engine):
    cfg = GridConfiguration(columns_for_breakpoint={Breakpoint.XS: 2.5})  # type: ignore[dict-item]
    with pytest.raises(ConfigurationError):
        engine.layout(1, 100, cfg)


def test_oversized_padding_yields_negative_width(engine):
    cfg = GridConfiguration(padding=200)
    # xs -> 3 columns: (300 - 400 - 2) / 3
    result = engine.layout(3, 300, cfg)
    assert result.cell_width == pytest.approx(-34)


def test_zero_items_yields_empty_placements(engine):
    result = engine.layout(0, 375)
    assert result.placements == ()
    assert result.row_count == 0


def test_negative_item_count_rejected(engine):
    with pytest.raises(ValueError):
        engine.layout(-1, 375)


@pytest.mark.parametrize("count", [1, 5, 8, 17])
def test_placements_match_item_count_and_order(engine, count):
    result = engine.layout(count, 1400)
    assert len(result.placements) == count
    assert [p.index for p in result.placements] == list(range(count))
    assert {p.cell_width for p in result.placements} == {result.cell_width}


def test_sequential_fill_wraps_every_column_count(engine):
    result = engine.layout(10, 375)  # 4 columns
    assert [(p.row, p.column) for p in result.placements[:6]] == [
        (0, 0),
        (0, 1),
        (0, 2),
        (0, 3),
        (1, 0),
        (1, 1),
    ]
    assert result.row_count == 3


def test_layout_is_deterministic(engine):
    cfg = GridConfiguration(padding=3)
    assert engine.layout(7, 900, cfg) == engine.layout(7, 900, cfg)


def test_arrange_binds_items_without_mutation(engine):
    items = ["a", "b", "c"]
    result = engine.arrange(items, 500)
    assert [p.item for p in result.placements] == ["a", "b", "c"]
    assert items == ["a", "b", "c"]
    assert result.breakpoint is Breakpoint.MD


def test_render_invokes_cell_in_order(engine):
    seen = []

    def cell(placement):
        seen.append(placement.index)
        return f"{placement.item}:{placement.cell_width:g}"

    out = engine.render(["x", "y"], 375, cell)
    assert out == ["x:93", "y:93"]
    assert seen == [0, 1]


def test_engine_default_config_is_used():
    engine = GridLayoutEngine(config=GridConfiguration(padding=10))
    assert engine.layout(1, 300).cell_width == pytest.approx((300 - 20 - 2) / 3)
