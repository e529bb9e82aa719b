import shutil

from rich.pretty import pprint

from litargs import *


def move(args, options):
    source, destination = args
    if options.get("cp"):
        shutil.copyfile(source, destination)
    else:
        shutil.move(source, destination)


cli = Litargs(colorful=True).command(
    "move",
    2,
    {"args": ["source", "destination"], "detail": "Move a file"},
    move,
).alias("m").option("cp", 0, {"detail": "copy"})


if __name__ == '__main__':
    pprint(cli.parse())
    cli.execute()
