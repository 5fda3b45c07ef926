import pytest

from rowsum_sched.matrix import initialize_matrix, partition_rows, sum_matrix
from rowsum_sched.threads import MAX_THREADS, main, sum_with_threads, validate_thread_count


def test_max_threads_is_the_largest_accepted_count():
    assert validate_thread_count(MAX_THREADS) == 256
    with pytest.raises(ValueError):
        validate_thread_count(MAX_THREADS + 2)


@pytest.mark.parametrize("count", [1, 2, 4, 6, 128, 256])
def test_validate_thread_count_accepts(count):
    assert validate_thread_count(count) == count


@pytest.mark.parametrize("count", [0, -2, 3, 7, 257, 258, 512])
def test_validate_thread_count_rejects(count):
    with pytest.raises(ValueError, match=f"Invalid number of threads: {count}"):
        validate_thread_count(count)


@pytest.mark.parametrize("count", [1, 2, 4, 8, 16])
def test_sum_with_threads_matches_direct_sum(count):
    matrix = initialize_matrix(16, 7)
    total, elapsed = sum_with_threads(count, matrix)
    assert total == sum_matrix(matrix, 0, 15)
    assert elapsed >= 0


def test_sum_with_threads_same_for_every_count():
    matrix = initialize_matrix(32, 9)
    totals = {sum_with_threads(count, matrix)[0] for count in (1, 2, 4, 8, 32)}
    assert len(totals) == 1


def test_sum_with_threads_drops_leftover_rows():
    matrix = initialize_matrix(10, 5)
    total, _ = sum_with_threads(4, matrix)
    stop = partition_rows(10, 4)[-1][1]
    assert total == sum_matrix(matrix, 0, stop - 1)
    assert total < sum_matrix(matrix, 0, 9)


def test_sum_with_threads_more_threads_than_rows():
    matrix = initialize_matrix(2, 3)
    total, _ = sum_with_threads(4, matrix)
    assert total == 0


@pytest.mark.parametrize("count", [3, 0, 300])
def test_sum_with_threads_rejects_invalid_count(count):
    with pytest.raises(ValueError):
        sum_with_threads(count, initialize_matrix(4, 4))


def test_main_usage(capsys):
    assert main([]) == 1
    assert "Usage:" in capsys.readouterr().out


@pytest.mark.parametrize("arg,shown", [("3", "3"), ("0", "0"), ("512", "512"), ("many", "0")])
def test_main_invalid_count(capsys, arg, shown):
    assert main([arg]) == 1
    assert f"Invalid number of threads: {shown}" in capsys.readouterr().out