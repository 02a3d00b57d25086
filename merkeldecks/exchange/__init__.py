"""Order book, CSV parsing, wallet and console menu for the exchange simulator."""