from sitedeploy.cli import cli

cli()
