from otelbuild.main import run

run()
