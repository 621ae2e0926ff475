from agentcore.multiagent.voting import VotingRound


def test_voting_majority_pass():
    round_ = VotingRound(1, 50, 3)
    round_.cast_vote(1, True)
    round_.cast_vote(2, True)
    assert round_.tally() is None
    round_.cast_vote(3, False)
    assert round_.tally() is True


def test_voting_majority_fail():
    round_ = VotingRound(1, 75, 4)
    round_.cast_vote(1, True)
    round_.cast_vote(2, False)
    round_.cast_vote(3, False)
    round_.cast_vote(4, False)
    assert round_.tally() is False


def test_no_duplicate_votes():
    round_ = VotingRound(1, 50, 2)
    round_.cast_vote(1, True)
    round_.cast_vote(1, False)
    assert len(round_.votes) == 1
    assert round_.votes == [(1, True)]


def test_unanimous():
    round_ = VotingRound(1, 100, 3)
    round_.cast_vote(1, True)
    round_.cast_vote(2, True)
    round_.cast_vote(3, True)
    assert round_.tally() is True


def test_tally_matches_majority():
    round_ = VotingRound(1, 60, 5)
    round_.cast_vote(1, True)
    round_.cast_vote(2, True)
    round_.cast_vote(3, True)
    round_.cast_vote(4, False)
    round_.cast_vote(5, False)
    assert round_.tally() is True
    total = len(round_.votes)
    assert 100 * round_.yes_count() >= round_.required_majority * total


def test_zero_expected_voters_fails():
    round_ = VotingRound(1, 50, 0)
    assert round_.tally() is False
    assert round_.is_complete()


def test_yes_and_no_counts():
    round_ = VotingRound(1, 50, 3)
    round_.cast_vote(1, True)
    round_.cast_vote(2, False)
    round_.cast_vote(3, False)
    assert round_.yes_count() == 1
    assert round_.no_count() == 2
    assert round_.yes_count() + round_.no_count() == len(round_.votes)


def test_is_complete():
    round_ = VotingRound(1, 50, 2)
    assert not round_.is_complete()
    round_.cast_vote(1, True)
    assert not round_.is_complete()
    round_.cast_vote(2, True)
    assert round_.is_complete()