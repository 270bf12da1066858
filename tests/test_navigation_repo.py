from models.navigation import NavState
from repositories.navigation_repo import MAX_DEPTH, NavigationRepository


def frame(n):
    return NavState(text=f"screen {n}", keyboard=None, message_id=n)


def test_pop_returns_frames_in_reverse_order(navigation):
    for n in range(3):
        navigation.push(1, frame(n))

    assert navigation.depth(1) == 3
    assert [navigation.pop(1) for _ in range(3)] == [frame(2), frame(1), frame(0)]


def test_entry_is_removed_when_stack_empties(navigation):
    navigation.push(1, frame(0))

    navigation.pop(1)

    assert navigation._stacks == {}
    assert navigation.depth(1) == 0


def test_pop_on_empty_history(navigation):
    assert navigation.pop(5) is None
    assert navigation._stacks == {}


def test_stacks_are_per_chat(navigation):
    navigation.push(1, frame(1))
    navigation.push(2, frame(2))

    assert navigation.pop(1) == frame(1)
    assert navigation.pop(1) is None
    assert navigation.pop(2) == frame(2)


def test_depth_is_capped_by_dropping_oldest():
    repo = NavigationRepository()
    for n in range(MAX_DEPTH + 5):
        repo.push(1, frame(n))

    assert repo.depth(1) == MAX_DEPTH
    popped = [repo.pop(1) for _ in range(MAX_DEPTH)]
    assert popped[0] == frame(MAX_DEPTH + 4)
    assert popped[-1] == frame(5)


def test_clear(navigation):
    navigation.push(3, frame(0))
    navigation.clear(3)
    assert navigation.pop(3) is None
