# MLB Box Scores
#
# USE: Terminal scoreboard for the day's MLB games
# HOW IT WORKS: Fetches the MLB Stats API schedule, formats every game into a
#   bordered box and prints the boxes as a colored grid
# FITS IN PROJECT: Root package; the CLI lives in scoreboard.cli

__version__ = "0.1.0"
