from slidepuzzle.engine.shuffler.shuffler import ShuffleRun, ShuffleStep, Shuffler

__all__ = ["ShuffleRun", "ShuffleStep", "Shuffler"]
