from camel_cards.main import cli

cli()
