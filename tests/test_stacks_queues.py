import pytest

from interviewkit.stacks_queues import (
    Animal,
    AnimalShelter,
    Cat,
    Dog,
    MinStack,
    SetOfStacks,
    TwoStackQueue,
    sort_stack,
)


def test_shelter_specific_dequeues():
    shelter = AnimalShelter()
    dog, cat = Dog("rex"), Cat("tom")
    shelter.enqueue(dog)
    shelter.enqueue(cat)
    assert shelter.dequeue_cat() is cat
    assert shelter.dequeue_dog() is dog
    assert shelter.dequeue_cat() is None
    assert shelter.dequeue_dog() is None


def test_shelter_dequeue_any_takes_oldest():
    shelter = AnimalShelter()
    animals = [Dog("a"), Cat("b"), Cat("c"), Dog("d")]
    for animal in animals:
        shelter.enqueue(animal)
    out = [shelter.dequeue_any() for _ in animals]
    assert out == animals
    assert shelter.dequeue_any() is None


def test_shelter_orders_increase():
    shelter = AnimalShelter()
    first, second = Cat(), Dog()
    shelter.enqueue(first)
    shelter.enqueue(second)
    assert first.order < second.order


def test_shelter_rejects_other_animals():
    with pytest.raises(TypeError):
        AnimalShelter().enqueue(Animal("bird"))


def test_two_stack_queue_sequence():
    queue = TwoStackQueue()
    queue.push(1)
    queue.push(2)
    assert queue.front() == 1
    queue.push(3)
    queue.push(4)
    assert queue.front() == 1
    queue.push(5)
    assert queue.pop() == 1
    assert queue.front() == 2
    queue.push(10)
    assert [queue.pop() for _ in range(3)] == [2, 3, 4]
    assert queue.front() == 5
    assert len(queue) == 2


def test_two_stack_queue_empty():
    queue = TwoStackQueue()
    with pytest.raises(IndexError):
        queue.pop()
    with pytest.raises(IndexError):
        queue.front()


@pytest.mark.parametrize("values", [[6, 8, 4, 9, 2], [], [1], [3, 3, 1, 2, 1]])
def test_sort_stack_puts_smallest_on_top(values):
    stack = list(values)
    sort_stack(stack)
    assert stack == sorted(values, reverse=True)
    if stack:
        assert stack[-1] == min(values)


def test_min_stack():
    stack = MinStack()
    mins = []
    for value in [5, 6, 3, 7]:
        stack.push(value)
        mins.append(stack.min())
    assert mins == [5, 5, 3, 3]
    assert stack.pop() == 7
    assert stack.min() == 3
    assert stack.pop() == 3
    assert stack.min() == 5
    assert stack.top() == 6


def test_min_stack_empty():
    stack = MinStack()
    with pytest.raises(IndexError):
        stack.min()
    with pytest.raises(IndexError):
        stack.pop()


def test_set_of_stacks_behaves_like_one_stack():
    stack = SetOfStacks(5)
    for value in range(1, 6):
        stack.push(value)
    assert stack.top() == 5
    stack.push(6)
    assert stack.top() == 6
    assert stack.pop() == 6
    assert stack.top() == 5
    assert [stack.pop() for _ in range(5)] == [5, 4, 3, 2, 1]
    with pytest.raises(IndexError):
        stack.pop()


def test_set_of_stacks_small_threshold():
    stack = SetOfStacks(1)
    values = list(range(10))
    for value in values:
        stack.push(value)
    assert [stack.pop() for _ in values] == values[::-1]


def test_set_of_stacks_bad_threshold():
    with pytest.raises(ValueError):
        SetOfStacks(0)