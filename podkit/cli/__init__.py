''' Allows the CLI to be imported as a module. '''
