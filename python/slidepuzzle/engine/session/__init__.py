from slidepuzzle.engine.session.session import PuzzleSession, SessionState

__all__ = ["PuzzleSession", "SessionState"]
