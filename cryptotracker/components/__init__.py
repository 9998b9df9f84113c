"""HTML fragments that make up the pages: card, list, portfolio row, error and loading."""