"""Interval data structures and closed chord mining."""