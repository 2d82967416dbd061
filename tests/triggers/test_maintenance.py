"""
维护时间换算测试
"""
import time

import pytest

from triggers.maintenance import Maintenance, get_maintenance_time, maintenance_timestamp


class TestGetMaintenanceTime:
    """预设时长测试"""

    def test_presets(self):
        """预设分钟数"""
        assert get_maintenance_time(Maintenance.OFF) == -1
        assert get_maintenance_time(Maintenance.QUARTER_HOUR) == 15
        assert get_maintenance_time(Maintenance.ONE_HOUR) == 60
        assert get_maintenance_time(Maintenance.ONE_DAY) == 1440
        assert get_maintenance_time(Maintenance.ONE_WEEK) == 10080

    def test_preset_by_name(self):
        """按名称查找"""
        assert get_maintenance_time("threeHours") == 180

    def test_raw_minutes(self):
        """直接给分钟数"""
        assert get_maintenance_time(45) == 45

    def test_unknown_preset(self):
        """未知预设"""
        with pytest.raises(ValueError):
            get_maintenance_time("forever")

    def test_bool_rejected(self):
        """布尔值不是分钟数"""
        with pytest.raises(ValueError):
            get_maintenance_time(True)


class TestMaintenanceTimestamp:
    """截止时间换算测试"""

    def test_positive_duration(self):
        """60 分钟 -> now + 3600"""
        assert maintenance_timestamp(60, now=1500000000) == 1500003600
        assert maintenance_timestamp(Maintenance.ONE_HOUR, now=1500000000.9) == 1500003600

    def test_uses_current_time(self):
        """默认取系统时间"""
        before = int(time.time())
        result = maintenance_timestamp(Maintenance.ONE_HOUR)
        after = int(time.time())
        assert before + 3600 <= result <= after + 3600

    def test_zero_passes_through(self):
        """0 原样透传"""
        assert maintenance_timestamp(0, now=1500000000) == 0

    def test_off_passes_through(self):
        """OFF 透传 -1"""
        assert maintenance_timestamp(Maintenance.OFF, now=1500000000) == -1
