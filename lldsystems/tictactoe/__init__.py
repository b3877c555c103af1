"""Tic-tac-toe engine with winning strategies, game states and a game registry."""