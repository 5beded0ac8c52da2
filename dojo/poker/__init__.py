"""Scoring poker games between two players by high cards, pairs and three of a kind."""