"""Сервис отчетов: сводка главного экрана, недельные и месячные отчеты."""

from datetime import date

from habit_tracker.core.logging import store_log as log
from habit_tracker.models import Habit
from habit_tracker.repositories import HabitRepository
from habit_tracker.schemas import DashboardSummary, HabitStats, PeriodReport, ReportPeriod
from habit_tracker.utils import count_days_in_window, resolve_today, round_half_up

from .habit_store import calculate_progress


def streak_progress_bar(habit: Habit, goal_days: int = 30) -> float:
    """
    Процент заполнения шкалы серии: min(100, streak / goal_days * 100).

    Это визуальная оценка по длине серии, она не связана с процентом выполнения за окно.
    Для привычки без единого дня выполнения шкала пуста.
    """
    if not habit.completed_dates or goal_days <= 0:
        return 0.0
    return min(100.0, habit.streak / goal_days * 100)


class ReportService:
    """
    Сервис агрегированной статистики по всем привычкам.

    Attributes:
        habit_repository (HabitRepository): Репозиторий коллекции привычек.
        weekly_window_days (int): Окно недельного отчета.
        monthly_window_days (int): Окно месячного отчета.
        streak_goal_days (int): Длина серии, соответствующая полной шкале.
        timezone_name (str | None): Часовой пояс для вычисления "сегодня".
    """

    def __init__(
        self,
        habit_repository: HabitRepository,
        *,
        weekly_window_days: int = 7,
        monthly_window_days: int = 30,
        streak_goal_days: int = 30,
        timezone_name: str | None = None,
    ):
        self.habit_repository = habit_repository
        self.weekly_window_days = weekly_window_days
        self.monthly_window_days = monthly_window_days
        self.streak_goal_days = streak_goal_days
        self.timezone_name = timezone_name

    def _resolve_today(self, today: date | None) -> date:
        return resolve_today(today, self.timezone_name)

    def window_for(self, period: ReportPeriod | str) -> int:
        """Длина окна в днях для периода отчета."""
        if ReportPeriod(period) == ReportPeriod.WEEKLY:
            return self.weekly_window_days
        return self.monthly_window_days

    @staticmethod
    def habit_stats(habit: Habit, window_days: int, today: date) -> HabitStats:
        """
        Статистика привычки за окно [today - window_days, today].

        Args:
            habit (Habit): Привычка.
            window_days (int): Длина окна.
            today (date): Правая граница окна.

        Returns:
            HabitStats: Процент выполнения и количество дней выполнения в окне.
        """
        completed_days = count_days_in_window(habit.completed_dates, today, window_days) if window_days > 0 else 0

        return HabitStats(
            habit_id=habit.id,
            name=habit.name,
            streak=habit.streak,
            progress=calculate_progress(habit, window_days, today),
            completed_days=completed_days,
        )

    def period_report(self, period: ReportPeriod | str = ReportPeriod.WEEKLY, today: date | None = None) -> PeriodReport:
        """
        Отчет по всем привычкам за неделю или месяц.

        Args:
            period (ReportPeriod | str): weekly или monthly.
            today (date | None): Правая граница окна, по умолчанию текущая дата.

        Returns:
            PeriodReport: Средний процент, сумма дней выполнения и число привычек со 100%.
        """
        period = ReportPeriod(period)
        window_days = self.window_for(period)
        today = self._resolve_today(today)

        stats = [self.habit_stats(habit, window_days, today) for habit in self.habit_repository.get_all()]

        average_progress = round_half_up(sum(item.progress for item in stats) / len(stats)) if stats else 0

        report = PeriodReport(
            period=period,
            window_days=window_days,
            total_habits=len(stats),
            average_progress=average_progress,
            total_completed_days=sum(item.completed_days for item in stats),
            perfect_habits=sum(1 for item in stats if item.progress >= 100),
            habits=stats,
        )

        log.debug(f"Отчет {period} на {today}: {report.total_habits} привычек, средний прогресс {average_progress}%.")
        return report

    def dashboard_summary(self, today: date | None = None) -> DashboardSummary:
        """
        Сводка для главного экрана.

        Средний прогресс считается по шкале серии (streak / streak_goal_days * 100)
        без ограничения сверху и округляется.

        Args:
            today (date | None): "Сегодня", по умолчанию текущая дата.

        Returns:
            DashboardSummary: Количество привычек, выполненных сегодня, сумма серий и средний прогресс.
        """
        today = self._resolve_today(today)
        habits = self.habit_repository.get_all()

        if habits:
            average_progress = round_half_up(
                sum(habit.streak / self.streak_goal_days * 100 for habit in habits) / len(habits)
            )
        else:
            average_progress = 0

        return DashboardSummary(
            total_habits=len(habits),
            completed_today=sum(1 for habit in habits if habit.is_completed_on(today)),
            total_streak=sum(habit.streak for habit in habits),
            average_progress=average_progress,
        )

    def progress_bar(self, habit: Habit) -> float:
        """Шкала серии привычки с настроенной целью (см. streak_progress_bar)."""
        return streak_progress_bar(habit, self.streak_goal_days)
