"""calc-spine command line interface."""
