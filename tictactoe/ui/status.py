from ..game_logic import WIN, DRAW


def status_text(engine):
    """
    one-line status for the label under the board
    """
    result = engine.outcome
    if result.status == WIN:
        return f"Winner: {result.mark}"
    if result.status == DRAW:
        return "It's a draw!"
    return f"Next: {engine.turn}"


def score_text(engine, mark):
    return f"{mark}: {engine.scores[mark]}"
