"""The individual utilities, one module per command, each with a main function."""