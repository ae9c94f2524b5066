"""User profile lifecycle and weight tracking."""

from dataclasses import dataclass, field
from zoneinfo import ZoneInfo

from calorie_tracker.domain.models import (
    Gender,
    Goal,
    UnitSystem,
    User,
    UserState,
    WeightLog,
)
from calorie_tracker.services.calculations import (
    calculate_daily_calories,
    default_protein_target,
    get_today_date,
    goal_calorie_offset,
)
from calorie_tracker.services.storage import (
    USER_STORAGE_KEY,
    StateRepository,
    load_state,
    save_state,
)


def create_user(  # noqa: PLR0913
    username: str,
    password: str,
    name: str,
    age: int,
    weight: float,
    target_weight: float,
    goal: Goal,
    unit_system: UnitSystem,
    gender: Gender = "male",
    tz: ZoneInfo | None = None,
) -> User:
    """Build a new user with calorie and protein targets for their goal."""
    target_calories = calculate_daily_calories(age, weight, gender, unit_system)
    target_calories += goal_calorie_offset(goal)
    return User(
        username=username,
        password=password,
        name=name,
        age=age,
        weight=weight,
        target_weight=target_weight,
        goal=goal,
        target_calories=target_calories,
        target_protein=default_protein_target(weight, unit_system),
        unit_system=unit_system,
        gender=gender,
        weight_logs=[WeightLog(date=get_today_date(tz), weight=weight)],
    )


@dataclass
class UserService:
    """Holds the single local user profile."""

    repository: StateRepository
    timezone: ZoneInfo | None = None
    state: UserState = field(init=False)

    def __post_init__(self) -> None:
        self.state = load_state(self.repository, USER_STORAGE_KEY, UserState)

    @property
    def user(self) -> User | None:
        """The stored user, if onboarding created one."""
        return self.state.user

    def set_user(self, user: User) -> None:
        """Store a user and mark them logged in."""
        self.state.user = user
        self.state.is_logged_in = True
        self._persist()

    def complete_onboarding(self) -> None:
        self.state.is_onboarded = True
        self._persist()

    def login(self, username: str, password: str) -> bool:
        """Check credentials against the stored user."""
        user = self.state.user
        if user is None or user.username != username or user.password != password:
            return False
        self.state.is_logged_in = True
        self._persist()
        return True

    def logout(self) -> None:
        self.state.is_logged_in = False
        self._persist()

    def reset_user(self) -> None:
        """Forget the user and onboarding progress."""
        self.state = UserState()
        self._persist()

    def update_weight(self, weight: float) -> None:
        """Set the current weight and record it for today."""
        user = self.state.user
        if user is None:
            return
        today = get_today_date(self.timezone)
        log = WeightLog(date=today, weight=weight)
        for index, existing in enumerate(user.weight_logs):
            if existing.date == today:
                user.weight_logs[index] = log
                break
        else:
            user.weight_logs.append(log)
        user.weight = weight
        self._persist()

    def update_target_weight(self, target_weight: float) -> None:
        self._update(target_weight=target_weight)

    def update_goal(self, goal: Goal) -> None:
        """Change the goal and recompute the calorie target for it."""
        user = self.state.user
        if user is None:
            return
        target_calories = calculate_daily_calories(
            user.age, user.weight, user.gender, user.unit_system
        )
        self._update(
            goal=goal, target_calories=target_calories + goal_calorie_offset(goal)
        )

    def update_target_calories(self, target_calories: int) -> None:
        self._update(target_calories=target_calories)

    def update_target_protein(self, target_protein: int) -> None:
        self._update(target_protein=target_protein)

    def effective_protein_target(self) -> int | None:
        """Return the explicit protein target or the weight-based default."""
        user = self.state.user
        if user is None:
            return None
        if user.target_protein is not None:
            return user.target_protein
        return default_protein_target(user.weight, user.unit_system)

    def _update(self, **changes: object) -> None:
        user = self.state.user
        if user is None:
            return
        self.state.user = user.model_copy(update=changes)
        self._persist()

    def _persist(self) -> None:
        save_state(self.repository, USER_STORAGE_KEY, self.state)
