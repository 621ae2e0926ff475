from agentcore.multiagent.debate import Debate


def test_debate_terminates():
    debate = Debate(42, 3)
    assert not debate.is_finished()
    debate.step(1, 100)
    debate.step(2, 101)
    debate.step(1, 102)
    assert debate.is_finished()
    assert debate.argument_count() == 3


def test_debate_noop_after_finished():
    debate = Debate(42, 1)
    debate.step(1, 100)
    assert debate.is_finished()
    debate.step(2, 101)
    assert debate.argument_count() == 1


def test_debate_zero_rounds():
    debate = Debate(42, 0)
    assert debate.is_finished()


def test_debate_records_arguments_in_order():
    debate = Debate(42, 3)
    debate.step(1, 100)
    debate.step(2, 101)
    assert debate.arguments == [(1, 100), (2, 101)]
    assert debate.rounds_remaining == 1
    assert debate.max_rounds == 3
    assert debate.topic_id == 42


def test_debate_equality():
    first = Debate(42, 2)
    second = Debate(42, 2)
    first.step(1, 100)
    assert first != second
    second.step(1, 100)
    assert first == second