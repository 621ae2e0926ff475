"""Elm-style application core: events, state, update, view and input adapters."""