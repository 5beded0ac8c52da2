"""The 2048 sliding-tile game: rules, board, saved state and a terminal front end."""