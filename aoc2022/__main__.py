from aoc2022.cli import app

if __name__ == "__main__":
    app(prog_name="aoc2022")
