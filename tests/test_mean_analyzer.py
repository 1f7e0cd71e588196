# tests/test_mean_analyzer.py
"""Tests for aggregate() and MeanAnalyzer."""

import logging

import numpy as np
import pandas as pd
import polars as pl
import pytest

from bloodmeans import InvalidArgument, MeanAnalyzer, Table, aggregate, bloodmeans


class TestUngroupedMeans:

    def test_column_means(self):
        result = aggregate({'var1': [1, 2, 3], 'var2': [4, 5, 6]})
        assert result.shape == (1, 2)
        assert list(result.columns) == ['var1', 'var2']
        assert result.loc[0, 'var1'] == 2.0
        assert result.loc[0, 'var2'] == 5.0

    def test_missing_values_are_skipped(self):
        result = aggregate({'x': [1, None, 3]})
        assert result.loc[0, 'x'] == 2.0

    def test_non_numeric_columns_dropped_order_kept(self):
        result = aggregate({'b': [1, 2], 'name': ['p', 'q'], 'flag': [True, False], 'a': [3, 4]})
        assert list(result.columns) == ['b', 'a']

    def test_empty_table_gives_single_missing_row(self):
        df = pd.DataFrame({'x': pd.Series(dtype=float), 'g': pd.Series(dtype='string')})
        result = aggregate(df)
        assert result.shape == (1, 1)
        assert np.isnan(result.loc[0, 'x'])

    def test_zero_columns(self):
        result = aggregate(pd.DataFrame())
        assert result.shape == (1, 0)

    def test_all_missing_column(self):
        result = aggregate({'x': [np.nan, np.nan], 'y': [1.0, 2.0]})
        assert np.isnan(result.loc[0, 'x'])
        assert result.loc[0, 'y'] == 1.5

    def test_all_none_column_gives_missing_mean(self):
        result = aggregate({'x': [None, None], 'y': [1, 2]})
        assert list(result.columns) == ['x', 'y']
        assert np.isnan(result.loc[0, 'x'])
        assert result.loc[0, 'y'] == 1.5


class TestGroupedMeans:

    def test_bloodsample_by_biofluid(self, bloodsample):
        result = bloodmeans(bloodsample, 'biofluid')
        assert list(result.columns) == ['biofluid', 'id', 'males', 'females']
        by_fluid = result.set_index('biofluid')
        assert by_fluid.loc['blood', 'males'] == 20.0
        assert by_fluid.loc['urine', 'males'] == 50.0
        assert by_fluid.loc['blood', 'females'] == 19.0
        assert by_fluid.loc['urine', 'females'] == 48.0
        assert by_fluid.loc['blood', 'id'] == 2.0

    def test_groups_in_order_of_first_appearance(self):
        result = aggregate({'g': ['b', 'a', 'b', 'c'], 'x': [1, 2, 3, 4]}, 'g')
        assert list(result['g']) == ['b', 'a', 'c']
        assert list(result['x']) == [2.0, 2.0, 4.0]

    def test_matches_pandas_groupby(self):
        rng = np.random.default_rng(42)
        df = pd.DataFrame({
            'g': rng.choice(['a', 'b', 'c', 'd'], size=200),
            'x': rng.normal(size=200),
            'label': rng.choice(['u', 'v'], size=200),
            'y': rng.integers(0, 100, size=200),
        })
        df.loc[::7, 'x'] = np.nan
        expected = df.groupby('g', sort=False)[['x', 'y']].mean().reset_index()
        result = aggregate(df, 'g')
        pd.testing.assert_frame_equal(result, expected, check_dtype=False)

    def test_each_group_appears_once(self):
        groups = ['a', 'b', 'a', 'c', 'b', 'a']
        result = aggregate({'g': groups, 'x': range(6)}, 'g')
        assert sorted(result['g']) == sorted(set(groups))
        assert not result['g'].duplicated().any()

    def test_group_with_only_missing_values(self):
        result = aggregate({'g': ['a', 'a', 'b'], 'x': [np.nan, np.nan, 1.0]}, 'g').set_index('g')
        assert np.isnan(result.loc['a', 'x'])
        assert result.loc['b', 'x'] == 1.0

    def test_all_none_column_gives_missing_mean_per_group(self):
        result = aggregate({'g': ['a', 'b'], 'x': [None, None]}, 'g')
        assert list(result.columns) == ['g', 'x']
        assert result['x'].isna().all()

    def test_missing_group_values_form_a_group(self):
        result = aggregate({'g': ['a', None, 'a', None], 'x': [1, 2, 3, 4]}, 'g')
        assert len(result) == 2
        assert result.loc[result['g'] == 'a', 'x'].item() == 2.0
        assert result.loc[result['g'].isna(), 'x'].item() == 3.0

    def test_numeric_group_key_is_not_averaged(self):
        result = aggregate({'g': [1, 1, 2], 'x': [1, 3, 5]}, 'g')
        assert list(result.columns) == ['g', 'x']
        assert list(result['g']) == [1, 2]
        assert list(result['x']) == [2.0, 5.0]

    def test_no_numeric_columns(self):
        result = aggregate({'g': ['a', 'b', 'a'], 's': ['x', 'y', 'z']}, 'g')
        assert list(result.columns) == ['g']
        assert list(result['g']) == ['a', 'b']

    def test_empty_table_gives_no_groups(self):
        df = pd.DataFrame({'g': pd.Series(dtype=object), 'x': pd.Series(dtype=float)})
        result = aggregate(df, 'g')
        assert len(result) == 0
        assert list(result.columns) == ['g', 'x']

    def test_unknown_group_key(self):
        with pytest.raises(InvalidArgument):
            aggregate({'x': [1, 2]}, 'nonexistent')

    def test_invalid_argument_is_value_error(self):
        with pytest.raises(ValueError):
            aggregate({'x': [1, 2]}, 'nonexistent')

    def test_polars_and_table_inputs(self):
        data = {'g': ['a', 'b', 'a'], 'x': [1.0, 2.0, 3.0]}
        expected = aggregate(data, 'g')
        pd.testing.assert_frame_equal(aggregate(pl.DataFrame(data), 'g'), expected)
        pd.testing.assert_frame_equal(aggregate(Table(data), 'g'), expected)


class TestPurity:

    def test_input_not_mutated(self, bloodsample):
        original = bloodsample.copy()
        aggregate(bloodsample, 'biofluid')
        aggregate(bloodsample)
        pd.testing.assert_frame_equal(bloodsample, original)

    def test_repeated_calls_identical(self, bloodsample):
        first = aggregate(bloodsample, 'biofluid')
        second = aggregate(bloodsample, 'biofluid')
        pd.testing.assert_frame_equal(first, second)
        assert first is not second

    def test_alias(self):
        assert bloodmeans is aggregate


class TestMeanAnalyzer:

    def test_compute_means_logs(self, logger, bloodsample, caplog):
        caplog.set_level(logging.INFO, logger=logger.name)
        result = MeanAnalyzer(logger).compute_means(bloodsample, 'biofluid')
        assert len(result) == 2
        assert "MeanAnalyzer: Computed means for 3 numeric columns across 2 groups of 'biofluid'." in caplog.text

    def test_compute_means_unknown_group_logs_and_raises(self, logger, bloodsample, caplog):
        caplog.set_level(logging.INFO, logger=logger.name)
        with pytest.raises(InvalidArgument):
            MeanAnalyzer(logger).compute_means(bloodsample, 'sex')
        assert any(r.levelno == logging.ERROR for r in caplog.records)

    def test_warns_without_numeric_columns(self, logger, caplog):
        caplog.set_level(logging.INFO, logger=logger.name)
        MeanAnalyzer(logger).compute_means({'g': ['a', 'b']}, 'g')
        assert "No numeric columns to average" in caplog.text

    def test_summarize(self, logger, bloodsample):
        summary = MeanAnalyzer(logger).summarize(bloodsample, 'biofluid')
        assert summary['group_column'] == 'biofluid'
        assert summary['n_rows'] == 6
        assert summary['n_groups'] == 2
        assert summary['numeric_columns'] == ['id', 'males', 'females']
        assert summary['dropped_columns'] == []
        assert summary['means'][0]['biofluid'] == 'blood'
        assert summary['means'][1]['males'] == 50.0

    def test_summarize_missing_means_become_none(self, logger):
        summary = MeanAnalyzer(logger).summarize({'x': [np.nan], 'name': ['a']})
        assert summary['n_groups'] == 1
        assert summary['dropped_columns'] == ['name']
        assert summary['means'] == [{'x': None}]
