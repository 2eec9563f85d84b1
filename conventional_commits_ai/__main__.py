from conventional_commits_ai.cli.main import run

run()
