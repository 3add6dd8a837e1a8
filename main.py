# main.py - run the command line tool from a source checkout
# (installed copies use the `placefinder` console script instead)

from placefinder.cli import run

if __name__ == "__main__":
    run()
