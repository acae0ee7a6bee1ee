import pytest

from config import ConfigurationError, ExamConfig


def test_defaults_cover_whole_bank():
    exam_config = ExamConfig()
    assert exam_config.start_index == 0
    assert exam_config.end_index == 50
    assert exam_config.window_size == 50


def test_window_indices():
    exam_config = ExamConfig(start_position=3, end_position=10)
    assert exam_config.start_index == 2
    assert exam_config.end_index == 10
    assert exam_config.window_size == 8


@pytest.mark.parametrize("start,end", [(5, 5), (10, 3), (0, 10), (1, 51)])
def test_invalid_window(start, end):
    with pytest.raises(ConfigurationError):
        ExamConfig(start_position=start, end_position=end)


def test_config_is_immutable():
    exam_config = ExamConfig()
    with pytest.raises(AttributeError):
        exam_config.start_position = 4


def test_check_bank_size():
    exam_config = ExamConfig(start_position=1, end_position=10)
    exam_config.check_bank_size(10)
    with pytest.raises(ConfigurationError):
        exam_config.check_bank_size(9)
