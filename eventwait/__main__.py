from eventwait.cli import main

main(prog_name="eventwait")
