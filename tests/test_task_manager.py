from algosolve.task_manager import TaskManager


def test_full_scenario():
    tm = TaskManager([[1, 101, 10], [2, 102, 20], [3, 103, 15]])
    assert len(tm) == 3
    tm.add(3, 1031, 5)
    assert len(tm) == 4
    tm.add(4, 104, 5)
    assert len(tm) == 5
    tm.edit(102, 8)
    assert tm.exec_top() == 3
    assert len(tm) == 4
    tm.remove(101)
    assert len(tm) == 3
    tm.add(5, 105, 15)
    assert tm.exec_top() == 5
    assert tm.exec_top() == 2
    assert tm.exec_top() == 3
    assert tm.exec_top() == 4
    assert tm.exec_top() == -1


def test_empty_manager_returns_minus_one():
    tm = TaskManager()
    assert tm.exec_top() == -1
    assert len(tm) == 0


def test_higher_priority_runs_first():
    tm = TaskManager([[1, 2000, 3000], [2, 2001, 3001]])
    assert tm.exec_top() == 2
    assert tm.exec_top() == 1


def test_tie_goes_to_larger_task_id():
    tm = TaskManager([[1, 10, 5], [2, 20, 5]])
    assert tm.exec_top() == 2
    assert tm.exec_top() == 1


def test_edit_raises_priority():
    tm = TaskManager([[1, 10, 1], [2, 20, 2]])
    tm.edit(10, 5)
    assert tm.exec_top() == 1
    assert tm.exec_top() == 2
    assert tm.exec_top() == -1


def test_edit_back_and_forth_runs_task_once():
    tm = TaskManager([[1, 10, 10], [2, 20, 7]])
    tm.edit(10, 5)
    tm.edit(10, 10)
    assert tm.exec_top() == 1
    assert tm.exec_top() == 2
    assert tm.exec_top() == -1


def test_unknown_ids_are_ignored():
    tm = TaskManager([[1, 10, 1]])
    tm.edit(99, 50)
    tm.remove(99)
    assert len(tm) == 1
    assert tm.exec_top() == 1


def test_removed_task_never_runs():
    tm = TaskManager([[1, 10, 9], [2, 20, 1]])
    tm.remove(10)
    assert tm.exec_top() == 2
    assert tm.exec_top() == -1
    assert len(tm) == 0