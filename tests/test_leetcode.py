import pytest

from olympiad.leetcode import min_difficulty, optimal_compression_length


def test_compression_examples():
    assert optimal_compression_length("aaabcccd", 2) == 4
    assert optimal_compression_length("aabbaa", 2) == 2
    assert optimal_compression_length("aaaaaaaaaaa", 0) == 3


@pytest.mark.parametrize("s", ["", "a", "abc", "zzzz"])
def test_compression_delete_everything(s):
    assert optimal_compression_length(s, len(s)) == 0


@pytest.mark.parametrize("s", ["abc", "qwerty", "xyzw"])
def test_compression_distinct_letters_unchanged(s):
    assert optimal_compression_length(s, 0) == len(s)


def test_compression_more_deletions_never_worse():
    s = "abbbcccddaab"
    costs = [optimal_compression_length(s, k) for k in range(len(s) + 1)]
    assert costs == sorted(costs, reverse=True)


def test_compression_negative_k():
    with pytest.raises(ValueError):
        optimal_compression_length("abc", -1)


def test_min_difficulty_example():
    assert min_difficulty([6, 5, 4, 3, 2, 1], 2) == 7


def test_min_difficulty_one_job_per_day():
    jobs = [1, 1, 1]
    assert min_difficulty(jobs, len(jobs)) == sum(jobs)


@pytest.mark.parametrize("jobs", [[3, 9, 4], [11, 111, 22, 222, 33], [5]])
def test_min_difficulty_single_day(jobs):
    assert min_difficulty(jobs, 1) == max(jobs)


def test_min_difficulty_more_days_cost_more():
    jobs = [7, 1, 7, 1, 7, 1]
    costs = [min_difficulty(jobs, d) for d in range(1, len(jobs) + 1)]
    assert costs == sorted(costs)


def test_min_difficulty_too_few_jobs():
    with pytest.raises(ValueError):
        min_difficulty([9, 9, 9], 4)
    with pytest.raises(ValueError):
        min_difficulty([1, 2], 0)