import threading

import pytest

from rustdrill.drills.concurrency import JobStatus, offset_sums, run_jobs


def test_offset_sums_cover_everything_once():
    numbers = list(range(100))
    sums = offset_sums(numbers, range(5), 5)
    assert sum(sums.values()) == sum(numbers)


def test_offset_sums_default_offsets_and_shift():
    numbers = list(range(100))
    sums = offset_sums(numbers)
    assert sorted(sums) == list(range(8))
    # starting five places later skips only the first number of offset 0
    assert sums[5] == sums[0] - numbers[0]
    assert sums[6] == sums[1] - numbers[1]


def test_offset_sums_step_one_sums_all():
    numbers = [3, 1, 4, 1, 5, 9, 2, 6]
    assert offset_sums(numbers, [0], 1) == {0: sum(numbers)}


def test_offset_past_end_is_zero():
    assert offset_sums([1, 2, 3], [10], 5) == {10: 0}


def test_offset_sums_prints(capsys):
    offset_sums([7], [0], 5)
    assert capsys.readouterr().out == "Sum of offset 0 is 7\n"


def test_offset_sums_rejects_bad_arguments():
    with pytest.raises(ValueError):
        offset_sums([1, 2], [0], 0)
    with pytest.raises(ValueError):
        offset_sums([1, 2], [-1], 5)


def test_job_status_counts_from_many_threads():
    status = JobStatus()
    seen = []
    lock = threading.Lock()

    def worker():
        for _ in range(50):
            n = status.complete_one()
            with lock:
                seen.append(n)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert status.completed() == 8 * 50
    assert sorted(seen) == list(range(1, 8 * 50 + 1))


def test_run_jobs_completes_all():
    status = run_jobs(5, 0.001, 0.001)
    assert status.completed() == 5


def test_run_jobs_zero_does_not_wait(capsys):
    status = run_jobs(0, 0.0, 0.0)
    assert status.completed() == 0
    assert capsys.readouterr().out == ""


def test_run_jobs_rejects_negative():
    with pytest.raises(ValueError):
        run_jobs(-1, 0.0, 0.0)
    with pytest.raises(ValueError):
        run_jobs(1, -0.1, 0.0)