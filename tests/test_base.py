"""
Tests for the indicator base layer.

Covers:
1. Base state: valid_from_bar, lookback period, length
2. Warm-up and first emission for any lookback period
3. Bounds follow exactly the emitted values
4. Construction errors
5. Construction modes: online, offline, attached, storage-less
6. Abstract generic base: the transform hook is required
"""

import logging
from abc import ABC

import numpy as np
import pytest

from barstream.core.errors import (
    LookbackPeriodMustBeGreaterThanZeroError,
    NotEnoughSourceDataForLookbackPeriodError,
    SourceDataEmptyError,
    ValueAvailableActionIsNilError,
)
from barstream.data.stream import BarStream
from barstream.indicators.base import (
    MAXIMUM_LOOKBACK_PERIOD,
    MINIMUM_LOOKBACK_PERIOD,
    BaseIndicator,
    BaseIndicatorWithFloatBounds,
    BaseIndicatorWithIntBounds,
    BaseIndicatorWithTimePeriod,
    Indicator,
    IndicatorState,
    IndicatorWithFloatBounds,
    IndicatorWithIntBounds,
    IndicatorWithTimePeriod,
    check_lookback_period,
    check_source_length,
    check_value_available_action,
)


class Delay(BaseIndicatorWithFloatBounds[float]):
    """Identity transform that skips the first ``lookback_period`` values."""

    def __init__(self, lookback_period: int, **options):
        check_lookback_period(lookback_period)
        super().__init__(lookback_period, **options)
        self._seen = 0

    def _transform(self, value: float, stream_bar_index: int) -> None:
        self._seen += 1
        if self._seen <= self.lookback_period:
            return
        self._publish(value, stream_bar_index)


class Windowed(BaseIndicatorWithFloatBounds[float], BaseIndicatorWithTimePeriod):
    """Time period p, lookback p - 1."""

    def __init__(self, time_period: int, **options):
        check_lookback_period(time_period)
        BaseIndicatorWithTimePeriod.__init__(self, time_period)
        super().__init__(time_period - 1, **options)

    def _transform(self, value: float, stream_bar_index: int) -> None:
        if stream_bar_index >= self.time_period:
            self._publish(value, stream_bar_index)


class Counter(BaseIndicatorWithIntBounds[int]):
    def __init__(self, **options):
        super().__init__(0, **options)

    def _transform(self, value, stream_bar_index: int) -> None:
        self._publish(int(value), stream_bar_index)


class TestConstants:
    def test_lookback_limits(self) -> None:
        assert MINIMUM_LOOKBACK_PERIOD == 0
        assert MAXIMUM_LOOKBACK_PERIOD == 100000


class TestBaseIndicator:
    def test_fresh_state(self) -> None:
        base = BaseIndicator(5)
        assert base.lookback_period == 5
        assert base.valid_from_bar == -1
        assert base.length == 0

    def test_record_emission_sets_valid_from_bar_once(self) -> None:
        base = BaseIndicator(2)
        assert base.record_emission(3) is True
        assert base.record_emission(4) is False
        assert base.record_emission(5) is False
        assert base.valid_from_bar == 3
        assert base.length == 3

    def test_time_period_is_independent_of_lookback(self) -> None:
        ind = Windowed(10)
        assert ind.time_period == 10
        assert ind.lookback_period == 9


class TestWarmUp:
    """Warm-up and first emission."""

    @pytest.mark.parametrize("period", [1, 2, 7, 50])
    def test_fresh_indicator(self, period: int) -> None:
        ind = Delay(period)
        assert ind.valid_from_bar == -1
        assert ind.length == 0
        assert len(ind) == 0
        assert ind.state is IndicatorState.UNATTACHED

    @pytest.mark.parametrize("period", [1, 2, 7, 50])
    def test_no_emission_during_warm_up(self, period: int) -> None:
        calls = []
        ind = Delay(period, value_available_action=lambda v, i: calls.append((v, i)))
        for i in range(1, period + 1):
            ind.receive_tick(float(i), i)

        assert ind.length == 0
        assert ind.valid_from_bar == -1
        assert calls == []
        assert ind.state is IndicatorState.WARMING_UP

    @pytest.mark.parametrize("period", [1, 2, 7, 50])
    def test_first_emission_after_lookback(self, period: int) -> None:
        calls = []
        ind = Delay.without_storage(period, value_available_action=lambda v, i: calls.append(i))
        for i in range(1, period + 2):
            ind.receive_tick(float(i), i)

        assert calls == [period + 1]
        assert ind.valid_from_bar == period + 1
        assert ind.state is IndicatorState.VALID

        for i in range(period + 2, period + 12):
            ind.receive_tick(float(i), i)
        assert ind.valid_from_bar == period + 1
        assert ind.length == 11

    def test_callback_sees_updated_bookkeeping(self) -> None:
        seen = []
        ind = None

        def action(value: float, stream_bar_index: int) -> None:
            seen.append((ind.length, ind.valid_from_bar, ind.max_value))

        ind = Delay(1, value_available_action=action)
        ind.receive_tick(1.0, 1)
        ind.receive_tick(9.0, 2)
        ind.receive_tick(4.0, 3)

        assert seen == [(1, 2, 9.0), (2, 2, 9.0)]

    def test_scenario_lookback_three(self) -> None:
        calls = []
        ind = Delay(3, value_available_action=lambda v, i: calls.append((v, i)))
        for i, value in enumerate([1.0, 2.0, 5.0, 3.0, 4.0], start=1):
            ind.receive_tick(value, i)

        assert calls == [(3.0, 4), (4.0, 5)]
        assert ind.valid_from_bar == 4
        assert ind.min_value == 3.0
        assert ind.max_value == 4.0
        assert ind.length == 2
        np.testing.assert_array_equal(ind.data, [3.0, 4.0])

    def test_update_numbers_bars(self) -> None:
        ind = Delay(2)
        assert ind.update(1.0) is None
        assert ind.update(2.0) is None
        assert ind.update(3.0) == 3.0
        assert ind.valid_from_bar == 3
        assert ind.is_ready


class TestBounds:
    def test_bounds_track_prefix_min_max(self) -> None:
        values = [3.5, -2.0, 7.25, 0.0, -4.5, 6.0, 12.0]
        ind = Delay(1)
        ind.receive_tick(0.0, 1)
        for i, value in enumerate(values, start=2):
            ind.receive_tick(value, i)
            emitted = values[: i - 1]
            assert ind.min_value == min(emitted)
            assert ind.max_value == max(emitted)

    def test_negative_values_only(self) -> None:
        ind = Delay(1)
        for i, value in enumerate([0.0, -5.0, -3.0, -8.0], start=1):
            ind.receive_tick(value, i)
        assert ind.min_value == -8.0
        assert ind.max_value == -3.0

    def test_int_bounds(self) -> None:
        ind = Counter()
        for i, value in enumerate([4, -1, 9, 2], start=1):
            ind.receive_tick(value, i)
        assert ind.min_value == -1
        assert ind.max_value == 9
        assert ind.valid_from_bar == 1
        assert ind.data.dtype == np.int64


class TestProtocols:
    def test_float_composite_satisfies_capabilities(self) -> None:
        ind = Windowed(3)
        assert isinstance(ind, Indicator)
        assert isinstance(ind, IndicatorWithFloatBounds)
        assert isinstance(ind, IndicatorWithTimePeriod)

    def test_int_composite_satisfies_capabilities(self) -> None:
        ind = Counter()
        assert isinstance(ind, Indicator)
        assert isinstance(ind, IndicatorWithIntBounds)
        assert not isinstance(ind, IndicatorWithTimePeriod)

    def test_composite_owns_its_parts(self) -> None:
        a = Delay(2)
        b = Delay(2)
        a.receive_tick(1.0, 1)
        a.receive_tick(1.0, 2)
        a.receive_tick(5.0, 3)
        assert a._bounds is not b._bounds
        assert a._base is not b._base
        assert b.length == 0


class TestValidation:
    @pytest.mark.parametrize("period", [0, -1, MAXIMUM_LOOKBACK_PERIOD + 1])
    def test_bad_lookback(self, period: int) -> None:
        with pytest.raises(LookbackPeriodMustBeGreaterThanZeroError):
            Delay(period)

    def test_zero_allowed_when_requested(self) -> None:
        check_lookback_period(0, allow_zero=True)
        check_lookback_period(MAXIMUM_LOOKBACK_PERIOD)
        with pytest.raises(LookbackPeriodMustBeGreaterThanZeroError):
            check_lookback_period(-1, allow_zero=True)

    def test_source_length(self) -> None:
        with pytest.raises(SourceDataEmptyError):
            check_source_length(0, 3)
        with pytest.raises(NotEnoughSourceDataForLookbackPeriodError):
            check_source_length(2, 3)
        check_source_length(3, 3)

    def test_value_available_action(self) -> None:
        with pytest.raises(ValueAvailableActionIsNilError):
            check_value_available_action(None)
        with pytest.raises(ValueAvailableActionIsNilError):
            check_value_available_action("not callable")

    def test_errors_are_value_errors(self) -> None:
        with pytest.raises(ValueError, match="Lookback period must be greater than 0"):
            Delay(0)


class TestConstructionModes:
    def test_storage_less_requires_action(self) -> None:
        with pytest.raises(ValueAvailableActionIsNilError):
            Delay.without_storage(3)
        with pytest.raises(ValueAvailableActionIsNilError):
            Delay.without_storage(3, value_available_action=None)

    def test_storage_less_has_no_data(self) -> None:
        ind = Delay.without_storage(1, value_available_action=lambda v, i: None)
        assert not ind.has_storage
        with pytest.raises(RuntimeError):
            ind.data

    def test_offline_storage_is_presized(self) -> None:
        ind = Delay.with_src_len(10, 3)
        assert ind._storage.capacity == 7
        for i in range(1, 11):
            ind.receive_tick(float(i), i)
        assert ind.length == 7
        np.testing.assert_array_equal(ind.data, np.arange(4.0, 11.0))

    def test_offline_storage_grows_past_declared_length(self) -> None:
        ind = Delay.with_src_len(4, 3)
        for i in range(1, 8):
            ind.receive_tick(float(i), i)
        assert ind.length == 4
        assert len(ind.data) == 4

    def test_offline_length_validation(self) -> None:
        with pytest.raises(SourceDataEmptyError):
            Delay.with_src_len(0, 3)
        with pytest.raises(NotEnoughSourceDataForLookbackPeriodError):
            Delay.with_src_len(2, 3)

    def test_from_bars(self, make_bars) -> None:
        ind = Delay.from_bars(make_bars([1.0, 2.0, 5.0, 3.0, 4.0]), 3)
        np.testing.assert_array_equal(ind.data, [3.0, 4.0])
        assert ind.valid_from_bar == 4

    def test_from_bars_validates_before_transform(self, make_bars) -> None:
        with pytest.raises(SourceDataEmptyError):
            Delay.from_bars([], 3)
        with pytest.raises(NotEnoughSourceDataForLookbackPeriodError):
            Delay.from_bars(make_bars([1.0, 2.0]), 3)
        with pytest.raises(NotEnoughSourceDataForLookbackPeriodError):
            Delay.from_bars(
                make_bars([1.0, 2.0]), 3,
                storage=False, value_available_action=lambda v, i: None,
            )

    def test_for_stream(self, make_bars) -> None:
        stream = BarStream()
        ind = Delay.for_stream(stream, 2)
        stream.receive_bars(make_bars([1.0, 2.0, 3.0, 4.0]))
        np.testing.assert_array_equal(ind.data, [3.0, 4.0])
        assert ind.valid_from_bar == 3

    def test_for_stream_with_src_len(self, make_bars) -> None:
        stream = BarStream()
        ind = Delay.for_stream_with_src_len(4, stream, 2, select_data=lambda bar: bar.close * 10)
        stream.receive_bars(make_bars([1.0, 2.0, 3.0, 4.0]))
        assert ind._storage.capacity == 2
        np.testing.assert_array_equal(ind.data, [30.0, 40.0])

    def test_storage_with_listener(self) -> None:
        calls = []
        ind = Delay(1, value_available_action=lambda v, i: calls.append(v))
        for i, value in enumerate([1.0, 2.0, 3.0], start=1):
            ind.receive_tick(value, i)
        assert calls == [2.0, 3.0]
        np.testing.assert_array_equal(ind.data, [2.0, 3.0])

    def test_data_is_read_only(self) -> None:
        ind = Delay(1)
        ind.update(1.0)
        ind.update(2.0)
        with pytest.raises(ValueError):
            ind.data[0] = 5.0


class TestLogging:
    def test_first_validity_logged(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="barstream.indicators.base"):
            ind = Delay(1)
            ind.update(1.0)
            ind.update(2.0)
            ind.update(3.0)
        messages = [r.getMessage() for r in caplog.records]
        assert "Delay valid from bar 2" in messages
        assert sum("valid from bar" in m for m in messages) == 1


class TestAbstractBase:
    def test_transform_is_required(self) -> None:
        class NoTransform(BaseIndicatorWithFloatBounds[float]):
            def __init__(self) -> None:
                super().__init__(1)

        with pytest.raises(TypeError):
            NoTransform()

    def test_transform_is_abstract(self) -> None:
        assert "_transform" in BaseIndicatorWithFloatBounds.__abstractmethods__
        assert "_transform" in BaseIndicatorWithIntBounds.__abstractmethods__
        assert isinstance(Delay(1), ABC)

    def test_update_returns_none_then_value(self) -> None:
        ind = Counter()
        assert ind.update(4.9) == 4
        assert Delay(1).update(1.0) is None

    def test_full_bar_subclass_refuses_select_data(self) -> None:
        class WholeBar(Counter):
            selects_data = False

        with pytest.raises(TypeError, match="select_data"):
            WholeBar(select_data=lambda bar: bar.high)
        assert WholeBar().length == 0
