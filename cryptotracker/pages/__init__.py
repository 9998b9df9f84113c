"""Page bodies for home, details, portfolio and not-found, built from the components and the store."""