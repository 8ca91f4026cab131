from models.seat import Seat, ScoredSeat, SeatChunk
from models.application import Application
from models.customer import Customer
from models.lottery import (
    Assignment, LockedSeat, LotteryConfig, LotteryResult, LotteryStats, ScoreUpdate,
)
